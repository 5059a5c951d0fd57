"""Tests for token resolution and validation."""

import pytest

from gh_octokit.auth import AuthenticationError, GitHubAuth


class TestGitHubAuthValidTokens:
    """Tests for GitHubAuth initialization with valid tokens."""

    @pytest.mark.parametrize("prefix", ["ghp_", "gho_", "ghu_", "ghs_", "ghr_"])
    def test_prefixed_token(self, prefix: str) -> None:
        """Test every classic token prefix is accepted."""
        token = prefix + "a" * 36
        auth = GitHubAuth(token=token)
        assert auth.token == token
        assert auth.is_anonymous is False

    def test_fine_grained_token(self) -> None:
        """Test github_pat_ tokens are accepted."""
        token = "github_pat_" + "A1b2" * 10
        assert GitHubAuth(token=token).token == token

    def test_classic_hex_token(self) -> None:
        """Test legacy 40-character hex tokens are accepted."""
        token = "abc123def456abc789def012abc345def6789abc"
        assert GitHubAuth(token=token).token == token

    def test_surrounding_whitespace_is_stripped(self) -> None:
        token = "ghp_" + "b" * 36
        assert GitHubAuth(token=f"  {token}\n").token == token


class TestGitHubAuthInvalidTokens:
    """Tests for GitHubAuth initialization with malformed tokens."""

    def test_empty_token(self) -> None:
        with pytest.raises(AuthenticationError, match="empty"):
            GitHubAuth(token="")

    def test_short_prefixed_token(self) -> None:
        with pytest.raises(AuthenticationError, match="too short"):
            GitHubAuth(token="ghp_abc")

    @pytest.mark.parametrize(
        "token",
        [
            "not-a-token",
            "ABC123DEF456ABC789DEF012ABC345DEF6789ABC",  # uppercase hex
            "a" * 39,
            "g" * 40,
        ],
    )
    def test_unrecognized_format(self, token: str) -> None:
        with pytest.raises(AuthenticationError, match="Invalid token format"):
            GitHubAuth(token=token)


class TestGitHubAuthEnvironment:
    """Tests for reading the token from the environment."""

    def test_reads_default_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        token = "ghp_" + "e" * 36
        monkeypatch.setenv("GITHUB_TOKEN", token)

        assert GitHubAuth().token == token

    def test_reads_custom_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        token = "ghs_" + "f" * 36
        monkeypatch.setenv("GHE_TOKEN", token)

        assert GitHubAuth(token_env="GHE_TOKEN").token == token

    def test_explicit_token_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test explicit token takes precedence over the environment."""
        monkeypatch.setenv("GITHUB_TOKEN", "ghp_" + "e" * 36)
        explicit = "gho_" + "x" * 36

        assert GitHubAuth(token=explicit).token == explicit

    def test_malformed_env_token_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GITHUB_TOKEN", "bogus")

        with pytest.raises(AuthenticationError):
            GitHubAuth()

    def test_empty_env_is_anonymous(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GITHUB_TOKEN", "")

        assert GitHubAuth().is_anonymous is True

    def test_env_lookup_disabled(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GITHUB_TOKEN", "ghp_" + "e" * 36)

        assert GitHubAuth(token_env=None).is_anonymous is True


class TestAuthorizationHeader:
    """Tests for the header sent with each request."""

    def test_token_header(self) -> None:
        token = "ghp_" + "a" * 36
        assert GitHubAuth(token=token).get_authorization_header() == {
            "Authorization": f"token {token}"
        }

    def test_anonymous_has_no_header(self) -> None:
        auth = GitHubAuth()

        assert auth.is_anonymous is True
        assert auth.token is None
        assert auth.get_authorization_header() == {}
