import aiohttp
import pytest

from vendaio.request import *
from vendaio.resource import ResourceError


async def coro(return_value=None):
    return return_value


class TestHttp:

    @pytest.mark.asyncio
    async def test_http(self, mocker):
        session = mocker.MagicMock(spec=aiohttp.ClientSession)
        aio_resp = mocker.Mock()
        aio_resp.status = 404
        aio_resp.reason = 'Not Found'
        aio_resp.headers = {'X-Response-Header': 'foo'}
        aio_resp.text.return_value = coro('{"foos": []}')
        aio_resp_class = type(session.request.return_value)
        aio_resp_class.__aexit__ = mocker.Mock(return_value=coro())
        aio_resp_class.__aenter__ = mocker.Mock(return_value=coro(aio_resp))

        req = Request(
            method='POST',
            url='http://example.com',
            params={'foo': 'x'},
            data={'bar': 'y'},
            headers={'X-Header': 'baz'},
        )
        resp = await http(session)(req)
        aio_req_args = session.request.call_args
        assert aio_req_args == (
            (req.method, req.url),
            {
                'params': req.params,
                'json': req.data,
                'headers': req.headers,
            },
        )
        assert aio_resp.text.call_args == ((), {'encoding': 'utf-8'})
        assert resp.status == 404
        assert resp.reason == 'Not Found'
        assert resp.headers == {'X-Response-Header': 'foo'}
        assert resp.body == '{"foos": []}'


def mock_handler(response, expected_request=None):
    async def handler(request):
        assert expected_request is None or \
            request.__dict__ == expected_request.__dict__
        return response
    return handler


class TestHandlers:

    @pytest.mark.parametrize('status', [200, 301])
    @pytest.mark.asyncio
    async def test_check_status_ok(self, status):
        req = Request()
        resp = Response(status=status)
        handler = mock_handler(resp, req)
        assert await check_status(handler)(req) == resp

    @pytest.mark.parametrize('status', [400, 404, 500])
    @pytest.mark.asyncio
    async def test_check_status_not_ok(self, status):
        req = Request()
        resp = Response(status=status, reason='Bad')
        handler = mock_handler(resp, req)
        with pytest.raises(HTTPError) as excinfo:
            await check_status(handler)(req)
        assert not isinstance(excinfo.value, Unauthorized)
        assert excinfo.value.response is resp
        assert str(excinfo.value) == f'HTTP response: {status} Bad'

    @pytest.mark.asyncio
    async def test_check_status_unauthorized(self):
        req = Request()
        resp = Response(status=401, reason='Unauthorized')
        handler = mock_handler(resp, req)
        with pytest.raises(Unauthorized) as excinfo:
            await check_status(handler)(req)
        assert 'not authorized' in str(excinfo.value)
        assert isinstance(excinfo.value, ResourceError)

    @pytest.mark.asyncio
    async def test_basic_auth(self):
        req = Request(headers={'X-Header': 'baz'})
        expected_request = req.copy()
        expected_request.headers['Authorization'] = \
            'Basic dXNlcjpzZWNyZXQ='
        resp = Response()
        handler = mock_handler(resp, expected_request)
        assert await basic_auth(handler, 'user', 'secret')(req) == resp


class TestRequest:

    def test_copy_is_deep(self):
        req = Request(params={'foo': 'x'})
        req_copy = req.copy()
        req_copy.params['foo'] = 'y'
        assert req.params == {'foo': 'x'}

    def test_defaults(self):
        req = Request()
        assert req.method == 'GET'
        assert req.params == {}
        assert req.headers == {}
        assert req.data is None
