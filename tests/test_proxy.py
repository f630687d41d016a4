import pytest

from patternkit.proxy import ProxyResource, RealSubjectResource, SubjectResource

OPEN = "I'm the RealSubject. I'm opening the Resource."
RELEASE = "I'm the RealSubject. I'm releasing the Resource."
ACCESS = "I'm the RealSubject. I'm accessing the Resource."
PROXY_CREATE = "I'm the Proxy. I don't need to open the Resource here."
PROXY_CLOSE = "I'm the Proxy. I'm gonna delete the RealSubject if any."


def lines(capsys):
    return capsys.readouterr().out.splitlines()


def test_real_subject_opens_on_creation(capsys):
    RealSubjectResource("resource_url")
    assert lines(capsys) == [OPEN]


def test_proxy_does_not_open_on_creation(capsys):
    ProxyResource("resource_url")
    assert lines(capsys) == [PROXY_CREATE]


def test_trivial_request_on_proxy_does_not_open(capsys):
    proxy = ProxyResource("resource_url")
    message = proxy.trivial_request()
    out = lines(capsys)
    assert message == SubjectResource.TRIVIAL_MESSAGE
    assert OPEN not in out


def test_proxy_access_opens_once(capsys):
    proxy = ProxyResource("resource_url")
    assert proxy.access() == ACCESS
    assert proxy.access() == ACCESS
    out = lines(capsys)
    assert out.count(OPEN) == 1
    assert out.count(ACCESS) == 2


def test_context_manager_releases_real_subject(capsys):
    with ProxyResource("resource_url") as proxy:
        proxy.access()
    out = lines(capsys)
    assert proxy.closed
    assert out[-2:] == [PROXY_CLOSE, RELEASE]


def test_close_without_access_releases_nothing(capsys):
    proxy = ProxyResource("resource_url")
    proxy.close()
    out = lines(capsys)
    assert RELEASE not in out
    assert out[-1] == PROXY_CLOSE


def test_close_is_idempotent(capsys):
    real = RealSubjectResource("resource_url")
    real.close()
    real.close()
    assert lines(capsys).count(RELEASE) == 1


def test_url_is_kept():
    assert ProxyResource("resource_url").url == "resource_url"


def test_subject_resource_is_abstract():
    with pytest.raises(TypeError):
        SubjectResource("resource_url")