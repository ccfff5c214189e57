"""Tests for the Horizon encodings of stellar_sdk assets."""

import pytest

from stellar_client.asset import (
    Asset,
    asset_from_canonical,
    asset_query_params,
    canonical_form,
    canonical_list,
)

ISSUER = "GA5ZSEJYB37JRC5AVCIA5MOP4RHTM335X2KGX3IHOJAPP5RE34K4KZVN"


class TestAssetEncodings:
    def test_native(self):
        asset = Asset.native()

        assert canonical_form(asset) == "native"
        assert asset_query_params(asset, "selling_") == {"selling_asset_type": "native"}

    def test_credit_alphanum4(self):
        asset = Asset("USD", ISSUER)

        assert asset.type == "credit_alphanum4"
        assert canonical_form(asset) == f"USD:{ISSUER}"

    def test_credit_alphanum12_from_code_length(self):
        assert Asset("LONGCODE", ISSUER).type == "credit_alphanum12"

    @pytest.mark.parametrize("code", ["", "THIRTEENCHARS"])
    def test_invalid_code_is_rejected(self, code):
        with pytest.raises(ValueError):
            Asset(code, ISSUER)

    def test_invalid_issuer_is_rejected(self):
        with pytest.raises(ValueError):
            Asset("USD", "GNOTANACCOUNT")

    def test_query_params_with_prefix(self):
        params = asset_query_params(Asset("EUR", ISSUER), "base_")

        assert params == {
            "base_asset_type": "credit_alphanum4",
            "base_asset_code": "EUR",
            "base_asset_issuer": ISSUER,
        }

    def test_from_canonical(self):
        assert asset_from_canonical("native").is_native()
        assert asset_from_canonical(f"USD:{ISSUER}") == Asset("USD", ISSUER)

    @pytest.mark.parametrize("value", ["USD", f"USD:{ISSUER}:extra", f":{ISSUER}", "USD:"])
    def test_malformed_canonical_is_rejected(self, value):
        with pytest.raises(ValueError):
            asset_from_canonical(value)

    def test_canonical_list(self):
        assets = [Asset.native(), Asset("USD", ISSUER)]

        assert canonical_list(assets) == f"native,USD:{ISSUER}"
