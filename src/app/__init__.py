"""App: orquestração, casos de uso e wiring do conector.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: casos de uso (execução de ações por item)
- protocols/: contratos/interfaces (ParameterSource, transporte)
- observability/: correlation_id e métricas via logs
- constants/: constantes da aplicação

Padrão: app executa; api adapta.
"""
