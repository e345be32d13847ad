"""Validators — checagem de payloads recebidos antes de qualquer IO.

Estrutura:
- contact/: formulário de contato (campos obrigatórios, formato de email)
"""

__all__: list[str] = []
