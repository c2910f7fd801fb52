"""
Tests for FileUtils and the httpx transport.
"""

import httpx
import pytest

from modfetch.artifact_downloader import HttpxTransport
from modfetch.modfetch_utils import FileUtils


class TestFileUtils:
    def test_list_with_extension(self, tmp_path):
        (tmp_path / "b.jar").write_bytes(b"")
        (tmp_path / "a.jar").write_bytes(b"")
        (tmp_path / "notes.txt").write_text("hello")
        (tmp_path / "a.jar.disabled").write_bytes(b"")
        assert FileUtils.list_with_extension(tmp_path, ".jar") == [
            tmp_path / "a.jar",
            tmp_path / "b.jar",
        ]

    def test_delete_path_file_and_directory(self, tmp_path):
        file_path = tmp_path / "a.jar"
        file_path.write_bytes(b"")
        dir_path = tmp_path / "nested.jar"
        (dir_path / "inner").mkdir(parents=True)
        FileUtils.delete_path(file_path)
        FileUtils.delete_path(dir_path)
        assert list(tmp_path.iterdir()) == []

    def test_reset_directory(self, tmp_path):
        directory = tmp_path / "replaymod"
        (directory / "sub").mkdir(parents=True)
        (directory / "a.jar").write_bytes(b"")
        FileUtils.reset_directory(directory)
        assert directory.is_dir()
        assert list(directory.iterdir()) == []

    def test_ensure_file_is_idempotent(self, tmp_path):
        marker = tmp_path / "marker"
        assert FileUtils.ensure_file(marker) is True
        marker.write_text("kept")
        assert FileUtils.ensure_file(marker) is False
        assert marker.read_text() == "kept"

    def test_download_to_missing_directory_opens_no_client(self, tmp_path, logger, monkeypatch):
        created = []
        real_client = httpx.Client

        def record_client(*args, **kwargs):
            client = real_client(*args, **kwargs)
            created.append(client)
            return client

        monkeypatch.setattr("modfetch.modfetch_utils.httpx.Client", record_client)
        with pytest.raises(FileNotFoundError):
            FileUtils.download_file(
                logger, "https://cdn.example/file.jar", tmp_path / "missing" / "file.jar"
            )
        assert created == []


class TestHttpxTransport:
    @staticmethod
    def client_for(handler):
        return httpx.Client(transport=httpx.MockTransport(handler))

    def test_download_writes_body(self, tmp_path, logger):
        requested = []

        def handler(request):
            requested.append(str(request.url))
            return httpx.Response(200, content=b"jar-bytes")

        transport = HttpxTransport(logger, client=self.client_for(handler))
        destination = tmp_path / "replaymod-1.20.4-2.6.15.jar"
        transport.download("https://cdn.example/file.jar", destination)

        assert destination.read_bytes() == b"jar-bytes"
        assert requested == ["https://cdn.example/file.jar"]
        assert list(tmp_path.iterdir()) == [destination]

    def test_download_follows_redirects(self, tmp_path, logger):
        def handler(request):
            if request.url.path == "/old.jar":
                return httpx.Response(302, headers={"Location": "https://cdn.example/new.jar"})
            return httpx.Response(200, content=b"moved")

        transport = HttpxTransport(logger, client=self.client_for(handler))
        destination = tmp_path / "file.jar"
        transport.download("https://cdn.example/old.jar", destination)
        assert destination.read_bytes() == b"moved"

    def test_http_error_leaves_no_file(self, tmp_path, logger):
        transport = HttpxTransport(
            logger, client=self.client_for(lambda request: httpx.Response(404))
        )
        with pytest.raises(httpx.HTTPStatusError):
            transport.download("https://cdn.example/missing.jar", tmp_path / "file.jar")
        assert list(tmp_path.iterdir()) == []

    def test_connection_error_leaves_no_file(self, tmp_path, logger):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        transport = HttpxTransport(logger, client=self.client_for(handler))
        with pytest.raises(httpx.ConnectError):
            transport.download("https://cdn.example/file.jar", tmp_path / "file.jar")
        assert list(tmp_path.iterdir()) == []
