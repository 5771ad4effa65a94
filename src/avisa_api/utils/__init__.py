"""Utilitários compartilhados do avisa_api."""
