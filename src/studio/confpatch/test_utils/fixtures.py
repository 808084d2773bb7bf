import json

import pytest

from studio.confpatch.test_utils.cli import CliHelpers


@pytest.fixture
def make_config(tmpdir):
    def _make_config(content, name='config.json'):
        path = tmpdir.join(name)
        if not isinstance(content, str):
            content = json.dumps(content)
        path.write_text(content, encoding='utf-8')
        return path

    return _make_config


@pytest.fixture
def cli(tmpdir):
    return CliHelpers(cwd=str(tmpdir))
