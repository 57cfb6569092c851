"""Rotas HTTP do conector Talenta."""
