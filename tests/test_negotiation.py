from werkzeug.datastructures import Headers

from ipku.negotiation import Format, is_command_line_client, negotiate, wants_structured_format

FIREFOX = 'Mozilla/5.0 (X11; Linux x86_64; rv:58.0) Gecko/20100101 Firefox/58.0'


def test_is_command_line_client():
    assert is_command_line_client(Headers([('User-Agent', 'curl/8.2.1')]))
    assert not is_command_line_client(Headers([('User-Agent', FIREFOX)]))
    assert not is_command_line_client(Headers())


def test_is_command_line_client_any_value_case_insensitive_name():
    headers = Headers([('user-agent', FIREFOX), ('USER-AGENT', 'curl/7.88.1')])
    assert is_command_line_client(headers)


def test_wants_structured_format():
    assert wants_structured_format(Headers([('Accept', 'application/json')]))
    assert wants_structured_format(Headers([('Accept', 'text/html, application/json;q=0.9')]))
    assert not wants_structured_format(Headers([('Accept', '*/*')]))
    assert not wants_structured_format(Headers())


def test_plain_mapping_headers():
    assert is_command_line_client({'user-agent': 'curl/8.2.1'})
    assert wants_structured_format({'ACCEPT': ['text/plain', 'application/json']})
    assert not wants_structured_format({'Content-Type': 'application/json'})


def test_negotiate_precedence():
    assert negotiate(Headers([('User-Agent', 'curl/8.2.1'), ('Accept', 'application/json')])) is Format.TEXT
    assert negotiate(Headers([('User-Agent', FIREFOX), ('Accept', 'application/json')])) is Format.JSON
    assert negotiate(Headers([('User-Agent', FIREFOX), ('Accept', 'text/html')])) is Format.HTML
    assert negotiate(Headers()) is Format.HTML
