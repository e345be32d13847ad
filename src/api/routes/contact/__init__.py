"""Rotas do formulário de contato (router em contact/router.py)."""
