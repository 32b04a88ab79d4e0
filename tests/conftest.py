import pytest

from ethtransfer.domain.models.transaction import Transaction
from factories import RECIPIENT, USDC, make_tx, transfer_input


@pytest.fixture()
def eth_transfer_tx() -> Transaction:
    return make_tx(value=10**18, block_number=17_000_000, transaction_index=3)


@pytest.fixture()
def token_transfer_tx() -> Transaction:
    return make_tx(to_address=USDC, input=transfer_input(RECIPIENT, 2_500_000))
