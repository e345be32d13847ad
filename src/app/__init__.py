"""App — orquestração, casos de uso e wiring.

Subpastas:
- bootstrap/: composition root (logging, validação de settings, factories)
- domain/: modelos do formulário de contato
- protocols/: contratos dos serviços externos (anti-bot, email)
- use_cases/: relay da submissão
- observability/: correlation_id para logs estruturados

Padrão: app executa; api adapta; config configura; utils apoia.
"""
