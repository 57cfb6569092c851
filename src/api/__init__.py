"""API: camada de borda e adapters da integração Talenta.

Responsabilidades:
- Descrever as ações remotas (catálogo)
- Assinar e enviar requests HTTP
- Normalizar respostas em linhas internas
- Expor rotas HTTP ao host

Subpastas:
- connectors/: catálogo, assinatura, transporte e paginação
- normalizers/: conversão de respostas externas → linhas
- routes/: endpoints HTTP (health, talenta)

NÃO PODE conter: orquestração de use cases.
"""
