import pytest

from studio.confpatch.patch import ConfigPatch
from studio.confpatch.result import (
    DATA_EXIT_CODE,
    InvalidStudioDappId,
    USAGE_EXIT_CODE,
    UsageError,
)
from studio.confpatch.validate import is_uint, validate

TOOL_A = ('file', 'studio-dapp-id')
TOOL_B = ('file', 'studio-dapp-id', 'ipfs-helia-gateway')


def _args(**kwargs):
    args = {'file': '', 'studio-dapp-id': '', 'ipfs-helia-gateway': ''}
    args.update((k.replace('_', '-'), v) for k, v in kwargs.items())
    return args


@pytest.mark.parametrize('value', ['0', '42', '007', '18446744073709551616'])
def test_is_uint_accepts_digits(value):
    assert is_uint(value)


@pytest.mark.parametrize(
    'value', ['-1', '+1', ' 1', '1 ', '1\n', '1.5', '1e3', 'abc', '٣'])
def test_is_uint_rejects_everything_else(value):
    assert not is_uint(value)


def test_tool_a_patch():
    result = validate(_args(file='c.json', studio_dapp_id='42'), TOOL_A)
    assert result.ok
    assert result.value == ConfigPatch(42)


def test_tool_b_patch_carries_gateway_verbatim():
    gateway = ' not a url/ '
    result = validate(
        _args(file='c.json', studio_dapp_id='7', ipfs_helia_gateway=gateway),
        TOOL_B,
    )
    assert result.ok
    assert result.value == ConfigPatch(7, [gateway])


def test_leading_zeros_are_decimal():
    result = validate(_args(file='c.json', studio_dapp_id='010'), TOOL_A)
    assert result.value.studio_dapp_id == 10


@pytest.mark.parametrize('missing', TOOL_B)
def test_missing_argument_is_usage_error(missing):
    args = _args(file='c.json', studio_dapp_id='7', ipfs_helia_gateway='gw')
    args[missing] = ''
    result = validate(args, TOOL_B)
    assert not result.ok
    assert isinstance(result.error, UsageError)
    assert result.error.missing == [missing]
    assert result.error.exit_code == USAGE_EXIT_CODE


def test_gateway_not_required_for_tool_a():
    assert validate(_args(file='c.json', studio_dapp_id='1'), TOOL_A).ok


def test_usage_checked_before_format():
    result = validate(_args(studio_dapp_id='abc'), TOOL_A)
    assert isinstance(result.error, UsageError)


def test_bad_studio_dapp_id_is_data_error():
    result = validate(_args(file='c.json', studio_dapp_id='abc'), TOOL_A)
    assert not result.ok
    assert isinstance(result.error, InvalidStudioDappId)
    assert result.error.exit_code == DATA_EXIT_CODE
    assert str(result.error) == 'invalid studio dapp id: abc'
