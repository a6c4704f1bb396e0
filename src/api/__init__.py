"""API: camada de borda com os adapters dos provedores de entrega.

Responsabilidades:
- Montar o payload nativo de cada provedor
- Autenticar (token assinado, OAuth, SigV4, basic, bearer)
- Ler respostas e erros no formato de cada provedor

Subpastas:
- connectors/: um adapter HTTP por provedor + registro

NÃO PODE conter: regras de merge/casing, fan-out ou normalização (ficam em app/).
"""
