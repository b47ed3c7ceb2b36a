"""Tests for su, logout and reserved owner commands."""


class TestSu:
    def test_root_login(self, run, kernel):
        assert run("su root sjtu") == []
        assert kernel.session.privilege == 7

    def test_wrong_password(self, run, kernel):
        assert run("su root nope") == ["Invalid"]
        assert len(kernel.session) == 0

    def test_unknown_account(self, run):
        assert run("su ghost pw") == ["Invalid"]

    def test_password_required_for_guest(self, run):
        assert run("su root") == ["Invalid"]

    def test_password_less_elevation_free_login(self, as_root, kernel):
        as_root("register alice pw Alice")
        assert as_root("su alice") == []
        assert kernel.session.current_account.user_id == "alice"

    def test_password_less_blocked_for_equal_privilege(self, as_root):
        as_root("useradd c1 pw 3 Clerk", "useradd c2 pw 3 Clerk", "su c1 pw")
        assert as_root("su c2") == ["Invalid"]

    def test_too_many_arguments(self, run):
        assert run("su root sjtu extra") == ["Invalid"]

    def test_file_separator_is_not_whitespace(self, run, kernel):
        assert run("su\x1croot sjtu") == ["Invalid"]
        assert len(kernel.session) == 0


class TestLogout:
    def test_guest_cannot_logout(self, run):
        assert run("logout") == ["Invalid"]

    def test_pops_one_frame(self, as_root, kernel):
        as_root("su root sjtu")
        assert as_root("logout") == []
        assert len(kernel.session) == 1

    def test_arguments_rejected(self, as_root):
        assert as_root("logout now") == ["Invalid"]


class TestReservedCommands:
    def test_owner_gets_empty_line(self, as_root):
        assert as_root("log") == [""]
        assert as_root("report finance extra") == [""]

    def test_non_owner_rejected(self, run):
        assert run("log") == ["Invalid"]
