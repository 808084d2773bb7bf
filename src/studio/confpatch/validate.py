import re

from studio.confpatch.args import STUDIO_DAPP_ID, IPFS_HELIA_GATEWAY
from studio.confpatch.patch import ConfigPatch, to_number
from studio.confpatch.result import (
    Failure,
    InvalidStudioDappId,
    Success,
    UsageError,
)

# ASCII only: \d would also accept other Unicode decimal digits
_UINT_RE = re.compile(r'[0-9]+')


def is_uint(value):
    return _UINT_RE.fullmatch(value) is not None


def validate(args, required):
    """Turn parsed arguments into a ConfigPatch.

    Required-ness is checked for every name in ``required`` before the
    studio dapp id format, so a missing argument is always reported as a
    usage error.
    """
    missing = [name for name in required if not args.get(name)]
    if missing:
        return Failure(UsageError(missing))

    studio_dapp_id = args[STUDIO_DAPP_ID]
    if not is_uint(studio_dapp_id):
        return Failure(InvalidStudioDappId(studio_dapp_id))

    gateways = None
    if IPFS_HELIA_GATEWAY in required:
        gateways = [args[IPFS_HELIA_GATEWAY]]

    return Success(ConfigPatch(to_number(studio_dapp_id), gateways))
