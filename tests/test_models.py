from hostswitch.models import HostEntry


def test_enabled_line() -> None:
    assert HostEntry("1.2.3.4", "example.com").to_hosts_line() == "1.2.3.4\texample.com"


def test_enabled_line_with_comment() -> None:
    e = HostEntry("1.2.3.4", "example.com", comment="prod")
    assert e.to_hosts_line() == "1.2.3.4\texample.com # prod"


def test_disabled_line() -> None:
    e = HostEntry("10.0.0.1", "test.local", enabled=False, comment="note")
    assert e.to_hosts_line() == "# 10.0.0.1\ttest.local # note"


def test_identity_is_not_content() -> None:
    a = HostEntry("1.2.3.4", "example.com")
    b = HostEntry("1.2.3.4", "example.com")
    assert a == b
    assert a.id != b.id


def test_toggled_keeps_id() -> None:
    a = HostEntry("1.2.3.4", "example.com")
    t = a.toggled()
    assert t.enabled is False
    assert t.id == a.id
    assert a.enabled is True
