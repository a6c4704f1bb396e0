"""App: núcleo compartilhado pelos conectores.

Subpastas:
- domain/: tipos de canal, opções de mensagem, resultados
- protocols/: contratos (conector, relógio)
- services/: pipeline de transformação, fan-out, normalização de erros
- infra/: credenciais, criptografia e cliente HTTP
- observability/: correlation_id para os logs estruturados

Padrão: app executa; api adapta; utils apoia.
"""
