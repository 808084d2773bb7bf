"""
Success/failure values returned by the parser, validator and patcher.

Nothing below the command entry points raises on bad input: every step
returns either ``Success(value)`` or ``Failure(error)``, and ``cli`` maps
the error to a process exit status.
"""

from collections import namedtuple

USAGE_EXIT_CODE = 1
DATA_EXIT_CODE = 2


class Success(namedtuple('Success', ['value'])):
    __slots__ = ()
    ok = True


class Failure(namedtuple('Failure', ['error'])):
    __slots__ = ()
    ok = False


class ConfigPatchError(Exception):
    exit_code = DATA_EXIT_CODE


class UsageError(ConfigPatchError):
    exit_code = USAGE_EXIT_CODE

    def __init__(self, missing):
        self.missing = list(missing)
        msg = 'missing required argument(s): {}'.format(
            ', '.join('--' + name for name in self.missing))
        super(UsageError, self).__init__(msg)


class DataError(ConfigPatchError):
    pass


class InvalidStudioDappId(DataError):
    def __init__(self, value):
        self.value = value
        super(InvalidStudioDappId, self).__init__(
            'invalid studio dapp id: {}'.format(value))


class ConfigReadError(DataError):
    pass


class ConfigParseError(DataError):
    pass


class NotAJsonObject(DataError):
    def __init__(self, path, type_name):
        msg = '{} does not contain a JSON object (found {})'.format(
            path, type_name)
        super(NotAJsonObject, self).__init__(msg)


class ConfigWriteError(DataError):
    pass
