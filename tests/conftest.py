import sys
from pathlib import Path

import pytest


def _add_src_to_path() -> None:
    root = Path(__file__).resolve().parents[1]
    src_path = root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


_add_src_to_path()


TRANSFER_SOURCE = "\n".join(
    [
        "pragma language_version >= 0.16;",
        "",
        "/**",
        " * @description Transfers tokens to a recipient.",
        " *",
        " * @circuitInfo k=11, rows=1305",
        " *",
        " * @param {ContractAddress} to - The recipient.",
        " * @param {Uint<64>} amount - The amount to transfer.",
        " *",
        " * @returns [] - No return values.",
        " */",
        "export circuit transfer(to: ContractAddress, amount: Uint<64>): [] {",
        "  return [];",
        "}",
        "",
    ]
)


@pytest.fixture
def transfer_source() -> str:
    return TRANSFER_SOURCE
