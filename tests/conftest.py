"""Configuração do pytest para o conector Talenta."""

import sys
from pathlib import Path

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

import pytest  # noqa: E402

from api.connectors.talenta.credentials import TalentaCredentials  # noqa: E402


@pytest.fixture
def credentials() -> TalentaCredentials:
    """Credenciais de teste apontando para a URL de produção."""
    return TalentaCredentials(
        client_id="client-id",
        client_secret="secret",
        base_url="https://api.mekari.com/v2/talenta/v2/",
    )
