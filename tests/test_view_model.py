from backend import config
from backend.state import AppState, LoginField, NavigateTo, Page, Theme, ToggleTheme
from UI.view_model import BLACK, WHITE, render


class TestRender:
    def test_login_page_footer(self):
        view = render(AppState(page=Page.LOGIN))

        assert view.page is Page.LOGIN
        assert [b.label for b in view.footer] == ["Toggle Theme", "Page Two"]
        assert view.footer[0].message == ToggleTheme()
        assert view.nav_button.message == NavigateTo(Page.REGISTER)

    def test_register_page_footer(self):
        view = render(AppState(page=Page.REGISTER))

        assert view.page is Page.REGISTER
        assert view.nav_button.label == "Main Page - Login"
        assert view.nav_button.message == NavigateTo(Page.LOGIN)

    def test_text_color_follows_theme(self):
        assert render(AppState(theme=Theme.LIGHT)).text_color == WHITE
        assert render(AppState(theme=Theme.DARK)).text_color == BLACK

    def test_login_values_and_title(self):
        view = render(AppState(login_field=LoginField("a@b.com", "pw")))

        assert view.title == config.APP_TITLE
        assert (view.email, view.password) == ("a@b.com", "pw")

    def test_render_does_not_mutate_state(self):
        state = AppState(theme=Theme.LIGHT, page=Page.REGISTER, login_field=LoginField("e", "p"))
        render(state)

        assert state == AppState(theme=Theme.LIGHT, page=Page.REGISTER, login_field=LoginField("e", "p"))
