# SPDX-FileCopyrightText: (c) 2025 Tenstorrent AI ULC
#
# SPDX-License-Identifier: Apache-2.0

import pytest

from growarray.constants import CHECK_INVARIANTS_ENV


@pytest.fixture(autouse=True)
def check_invariants(monkeypatch: pytest.MonkeyPatch) -> None:
    """Verify array invariants after every mutating operation."""
    monkeypatch.setenv(CHECK_INVARIANTS_ENV, "1")
