"""관리자 카지노 폼 상태 테스트"""

from datetime import date

import pytest

from getabonus.application.forms.casino_form import CasinoFormState, update_casino_form


@pytest.fixture
def valid_form() -> CasinoFormState:
    return CasinoFormState(
        name="Stake Casino",
        description="Crypto casino with provably fair games",
        website_url="https://stake.com",
        license="Curacao eGaming",
        established_year=2017,
        safety_index=9.2,
        payment_methods=("Bitcoin",),
    )


class TestUpdateCasinoForm:
    """단방향 갱신 함수 테스트"""

    def test_returns_new_state(self):
        state = CasinoFormState()
        updated = update_casino_form(state, "name", "Roobet")

        assert updated.name == "Roobet"
        assert state.name == ""

    def test_list_fields_become_tuples(self):
        updated = update_casino_form(CasinoFormState(), "features", ["VIP Program", "Live Casino"])
        assert updated.features == ("VIP Program", "Live Casino")

    def test_unknown_field(self):
        with pytest.raises(ValueError, match="Unknown casino form field"):
            update_casino_form(CasinoFormState(), "trust_score", 5)


class TestValidate:
    """폼 검증 테스트"""

    def test_valid_form(self, valid_form):
        assert valid_form.validate() == {}
        assert valid_form.is_valid() is True

    def test_default_form_errors(self):
        errors = CasinoFormState().validate()
        assert set(errors) == {"name", "description", "website_url", "license"}

    def test_invalid_urls(self, valid_form):
        form = update_casino_form(valid_form, "website_url", "stake.com")
        form = update_casino_form(form, "logo_url", "ftp://logo")

        errors = form.validate()

        assert "website_url" in errors
        assert "logo_url" in errors

    def test_empty_logo_url_allowed(self, valid_form):
        assert "logo_url" not in update_casino_form(valid_form, "logo_url", "").validate()

    def test_year_range(self, valid_form):
        assert "established_year" in update_casino_form(valid_form, "established_year", 1989).validate()
        future = date.today().year + 1
        assert "established_year" in update_casino_form(valid_form, "established_year", future).validate()

    def test_safety_index_range(self, valid_form):
        assert "safety_index" in update_casino_form(valid_form, "safety_index", 10.5).validate()


class TestToCasino:
    """Casino 변환 테스트"""

    def test_builds_casino(self, valid_form):
        casino = valid_form.to_casino("stake")

        assert casino.id == "stake"
        assert casino.safety_index == 9.2
        assert casino.payment_methods == ["Bitcoin"]
        assert casino.created_at is not None

    def test_invalid_form_raises(self):
        with pytest.raises(ValueError, match="Invalid casino form"):
            CasinoFormState().to_casino("x")

    def test_round_trip_from_casino(self, sample_casino):
        form = CasinoFormState.from_casino(sample_casino)

        assert form.name == "Stake Casino"
        assert form.payment_methods == ("Bitcoin", "Ethereum", "Litecoin")
        assert form.to_casino(sample_casino.id).features == sample_casino.features
