"""API — camada de borda.

Responsabilidades:
- Receber o formulário de contato (routes/)
- Validar campos e formato (validators/)
- Renderizar e montar payloads externos (payload_builders/)
- Falar com Turnstile e SendGrid (connectors/)

NÃO PODE conter: wiring de dependências nem leitura de secrets fora das factories.
"""
