"""
State machine tests.
Covers the four messages handled by backend.state.update.
"""

import copy

import pytest

from backend.state import (
    AppState,
    LoginField,
    LoginFieldChange,
    LoginSubmit,
    NavigateTo,
    Page,
    Theme,
    ToggleTheme,
    UnknownRouteError,
    initial_state,
    update,
)


# ===========================================================================
# Initial state
# ===========================================================================


class TestInitialState:
    def test_defaults(self):
        """Fresh state is dark, on the login page, with an empty buffer."""
        state = initial_state()

        assert state.theme is Theme.DARK
        assert state.page is Page.LOGIN
        assert state.login_field == LoginField(email="", password="")

    def test_instances_do_not_share_buffer(self):
        a = initial_state()
        b = initial_state()
        update(a, LoginFieldChange("x@y.z", "secret"))

        assert b.login_field == LoginField()

    def test_update_returns_same_object(self):
        state = initial_state()
        assert update(state, ToggleTheme()) is state


# ===========================================================================
# ToggleTheme
# ===========================================================================


class TestToggleTheme:
    def test_dark_to_light(self):
        state = update(initial_state(), ToggleTheme())
        assert state.theme is Theme.LIGHT

    @pytest.mark.parametrize("theme", list(Theme))
    def test_toggle_twice_restores_theme(self, theme):
        state = AppState(theme=theme)
        update(state, ToggleTheme())
        update(state, ToggleTheme())
        assert state.theme is theme

    def test_toggle_leaves_other_fields(self):
        state = AppState(page=Page.REGISTER, login_field=LoginField("a", "b"))
        update(state, ToggleTheme())

        assert state.page is Page.REGISTER
        assert state.login_field == LoginField("a", "b")


# ===========================================================================
# LoginFieldChange
# ===========================================================================


class TestLoginFieldChange:
    @pytest.mark.parametrize(
        "email, password",
        [
            ("a@b.com", "pw"),
            ("", ""),
            ("only-email@example.org", ""),
            ("", "only-password"),
            ("ünïcødé@例え.jp", "p@$$ w0rd\n\t"),
        ],
    )
    def test_overwrites_both_fields(self, email, password):
        state = AppState(login_field=LoginField("old@mail.com", "old-password"))
        update(state, LoginFieldChange(email, password))

        assert state.login_field == LoginField(email=email, password=password)

    def test_empty_values_clear_buffer(self):
        state = AppState(login_field=LoginField("x", "y"))
        update(state, LoginFieldChange("", ""))

        assert state.login_field.email == ""
        assert state.login_field.password == ""


# ===========================================================================
# LoginSubmit
# ===========================================================================


class TestLoginSubmit:
    @pytest.mark.parametrize(
        "state",
        [
            AppState(),
            AppState(theme=Theme.LIGHT, page=Page.REGISTER),
            AppState(login_field=LoginField("", "")),
            AppState(login_field=LoginField("<script>&'\"", "🔑 \\ %s {}")),
        ],
    )
    def test_is_a_no_op(self, state):
        before = copy.deepcopy(state)
        update(state, LoginSubmit())
        assert state == before

    def test_password_not_logged(self, caplog):
        state = AppState(login_field=LoginField("a@b.com", "hunter2"))
        with caplog.at_level("DEBUG", logger="login_demo"):
            update(state, LoginSubmit())
            update(state, LoginFieldChange("a@b.com", "hunter2"))

        assert "hunter2" not in caplog.text


# ===========================================================================
# NavigateTo
# ===========================================================================


class TestNavigateTo:
    def test_login_to_register(self):
        state = AppState(page=Page.LOGIN)
        update(state, NavigateTo("Register"))
        assert state.page is Page.REGISTER

    def test_register_to_login(self):
        state = AppState(page=Page.REGISTER)
        update(state, NavigateTo("Login"))
        assert state.page is Page.LOGIN

    def test_accepts_page_member(self):
        state = AppState()
        update(state, NavigateTo(Page.REGISTER))
        assert state.page is Page.REGISTER

    def test_navigate_to_current_page(self):
        state = AppState(page=Page.LOGIN)
        update(state, NavigateTo(Page.LOGIN))
        assert state.page is Page.LOGIN

    def test_route_name_resolved_to_page(self):
        assert NavigateTo("Register").page is Page.REGISTER
        assert NavigateTo("Register") == NavigateTo(Page.REGISTER)

    @pytest.mark.parametrize("page", list(Page))
    @pytest.mark.parametrize("route", ["Unknown", "", "register", "LOGIN", " Login"])
    def test_unknown_route_fails_and_page_unchanged(self, page, route):
        state = AppState(page=page)

        with pytest.raises(UnknownRouteError):
            update(state, NavigateTo(route))

        assert state.page is page

    def test_unknown_route_is_value_error(self):
        with pytest.raises(ValueError):
            Page.from_route("Settings")

    def test_rejects_non_page_payload(self):
        with pytest.raises(TypeError):
            NavigateTo(1)


# ===========================================================================
# Dispatcher
# ===========================================================================


class TestDispatcher:
    def test_rejects_unknown_message(self):
        state = AppState()
        with pytest.raises(TypeError):
            update(state, "ToggleTheme")
        assert state == AppState()

    def test_end_to_end_scenario(self):
        """Buffer survives navigation since nothing clears it."""
        state = initial_state()

        update(state, LoginFieldChange("a@b.com", "pw"))
        update(state, ToggleTheme())
        update(state, NavigateTo("Register"))

        assert state.theme is Theme.LIGHT
        assert state.page is Page.REGISTER
        assert state.login_field == LoginField(email="a@b.com", password="pw")
