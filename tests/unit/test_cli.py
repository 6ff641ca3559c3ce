"""Tests for the command line interface."""
import aiohttp
import pytest
from typer.testing import CliRunner

from b2py import StorageClient
from b2py.cli import main as cli


runner = CliRunner()

CREDENTIALS = ['--key-id', 'keyId', '--application-key', 'secret']


@pytest.fixture
def fake_client(monkeypatch, http_session):
    """Route CLI clients to the fake HTTP session."""
    def factory(key_id, application_key):
        return StorageClient(key_id, application_key, http_session=http_session)

    monkeypatch.setattr(cli, 'StorageClient', factory)
    return http_session


class TestCLI:
    """Test suite for CLI commands."""

    def test_authorize(self, fake_client):
        result = runner.invoke(cli.app, ['authorize', *CREDENTIALS])

        assert result.exit_code == 0
        assert 'acc123' in result.output
        assert 'writeKeys' in result.output

    def test_credentials_from_environment(self, fake_client):
        result = runner.invoke(
            cli.app,
            ['authorize'],
            env={'B2_APPLICATION_KEY_ID': 'envKey', 'B2_APPLICATION_KEY': 'envSecret'},
        )

        assert result.exit_code == 0
        assert fake_client.calls[0]['headers']['Authorization'].startswith('Basic ')

    def test_unauthorized_exits_with_error(self, fake_client):
        fake_client.reset('b2_authorize_account').add('b2_authorize_account', {}, status=401)

        result = runner.invoke(cli.app, ['authorize', *CREDENTIALS])

        assert result.exit_code == 1
        assert 'expired' in result.output

    def test_create_key(self, fake_client):
        fake_client.add('b2_create_key', {'applicationKeyId': 'k1', 'applicationKey': 's1'})

        result = runner.invoke(
            cli.app,
            ['create-key', 'test', '-c', 'readFiles', '-c', 'listFiles', *CREDENTIALS],
        )

        assert result.exit_code == 0
        assert 'k1' in result.output
        body = fake_client.last_body('b2_create_key')
        assert body['capabilities'] == ['readFiles', 'listFiles']
        assert 'bucketId' not in body

    def test_create_key_rejects_unknown_capability(self, fake_client):
        result = runner.invoke(cli.app, ['create-key', 'test', '-c', 'everything', *CREDENTIALS])

        assert result.exit_code != 0
        assert fake_client.calls == []

    def test_delete_key(self, fake_client):
        fake_client.add('b2_delete_key', {})

        result = runner.invoke(cli.app, ['delete-key', 'k1', *CREDENTIALS])

        assert result.exit_code == 0
        assert fake_client.last_body('b2_delete_key') == {'applicationKeyId': 'k1'}

    def test_create_bucket_duplicate(self, fake_client):
        fake_client.add('b2_create_bucket', {}, status=400)

        result = runner.invoke(cli.app, ['create-bucket', 'taken', *CREDENTIALS])

        assert result.exit_code == 1
        assert 'already in use' in result.output

    def test_upload_url(self, fake_client):
        fake_client.add('b2_get_upload_url', {'uploadUrl': 'https://up/1', 'authorizationToken': 'ut'})

        result = runner.invoke(cli.app, ['upload-url', 'bucket1', *CREDENTIALS])

        assert result.exit_code == 0
        assert 'https://up/1' in result.output

    def test_ls(self, fake_client):
        fake_client.add('b2_list_file_names', {'files': [
            {'fileName': 'photos/', 'action': 'folder'},
            {'fileName': 'readme.txt', 'action': 'upload', 'contentLength': 1200, 'fileId': 'f1'},
        ]})

        result = runner.invoke(cli.app, ['ls', 'bucket1', '--prefix', 'p', *CREDENTIALS])

        assert result.exit_code == 0
        assert 'photos/' in result.output
        assert 'readme.txt' in result.output
        assert fake_client.last_body('b2_list_file_names')['prefix'] == 'p'

    def test_ls_long(self, fake_client):
        fake_client.add('b2_list_file_names', {'files': [
            {'fileName': 'readme.txt', 'action': 'upload', 'contentLength': 1200, 'fileId': 'f1'},
        ]})

        result = runner.invoke(cli.app, ['ls', 'bucket1', '-l', *CREDENTIALS])

        assert result.exit_code == 0
        assert '1,200' in result.output

    def test_delete_unknown_key_reports_http_error(self, fake_client):
        fake_client.add('b2_delete_key', {'code': 'bad_request'}, status=400)

        result = runner.invoke(cli.app, ['delete-key', 'gone', *CREDENTIALS])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert 'HTTP 400' in result.output

    def test_connection_failure_reports_error(self, fake_client):
        fake_client.reset('b2_authorize_account').add_error(
            'b2_authorize_account', aiohttp.ClientConnectionError('connection refused')
        )

        result = runner.invoke(cli.app, ['authorize', *CREDENTIALS])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert 'connection refused' in result.output
