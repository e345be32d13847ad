"""Connectors — adapters de borda para APIs externas.

Estrutura:
- turnstile/: Cloudflare Turnstile siteverify
- email/: SendGrid v3 mail/send

Cada serviço tem seu próprio connector, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
