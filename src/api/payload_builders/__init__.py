"""Payload builders — construção de payloads para APIs externas.

Estrutura:
- email/: corpos text/html do formulário de contato e payload SendGrid
"""

__all__: list[str] = []
