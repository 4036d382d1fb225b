"""Unit tests for DOI encoding and URL construction."""

from doimeta.core.ids import quote_doi, build_work_url


class TestQuoteDOI:
    """Tests for DOI percent-encoding."""

    def test_slash_encoded(self) -> None:
        """Test the prefix/suffix slash is escaped."""
        assert quote_doi("10.1145/3292500.3330701") == "10.1145%2F3292500.3330701"

    def test_reserved_characters(self) -> None:
        """Test reserved URL characters are escaped."""
        assert quote_doi("10.1002/(SICI)1097;2-#?&") == "10.1002%2F(SICI)1097%3B2-%23%3F%26"

    def test_unreserved_marks_kept(self) -> None:
        """Test marks left alone by encodeURIComponent stay literal."""
        assert quote_doi("a-b_c.d!e~f*g'h(i)") == "a-b_c.d!e~f*g'h(i)"

    def test_space_and_unicode(self) -> None:
        """Test spaces and non-ASCII characters are UTF-8 percent-encoded."""
        assert quote_doi("10.1/a b") == "10.1%2Fa%20b"
        assert quote_doi("10.1/é") == "10.1%2F%C3%A9"

    def test_not_normalized(self) -> None:
        """Test the DOI is otherwise passed through untouched."""
        assert quote_doi("10.1234/ABC") == "10.1234%2FABC"


class TestBuildWorkURL:
    """Tests for works endpoint URLs."""

    def test_default_endpoint(self) -> None:
        assert (
            build_work_url("https://api.crossref.org/works", "10.1/x")
            == "https://api.crossref.org/works/10.1%2Fx"
        )

    def test_trailing_slash_base(self) -> None:
        assert build_work_url("http://localhost/works/", "10.1/x") == "http://localhost/works/10.1%2Fx"
