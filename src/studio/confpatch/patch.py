import json
import logging
import math
import os
import re
from collections import OrderedDict

from studio.confpatch.result import (
    ConfigParseError,
    ConfigReadError,
    ConfigWriteError,
    Failure,
    NotAJsonObject,
    Success,
)

logger = logging.getLogger(__name__)

STUDIO_DAPP_ID_KEY = 'studioDappId'
IPFS_HELIA_GATEWAYS_KEY = 'ipfsHeliaGateways'

# doubles at or above this are printed in exponent form, e.g. 1e+21
_EXPONENT_THRESHOLD = 1e21
_LONE_SURROGATE_RE = re.compile('[\ud800-\udfff]')


def to_number(digits):
    """Convert a decimal digit string the way a double-precision parse does.

    Digits beyond double precision are rounded away, values of 1e21 and up
    stay floats, and anything too large to represent becomes ``inf``.
    """
    value = float(digits)
    if math.isinf(value) or value >= _EXPONENT_THRESHOLD:
        return value
    return int(value)


def format_number(value):
    if math.isinf(value):
        return 'Infinity'
    return str(value)


class ConfigPatch(object):
    """The fields the tools own; everything else in the file is left alone."""

    def __init__(self, studio_dapp_id, ipfs_helia_gateways=None):
        self.studio_dapp_id = studio_dapp_id
        self.ipfs_helia_gateways = ipfs_helia_gateways

    def apply(self, document):
        studio_dapp_id = self.studio_dapp_id
        if isinstance(studio_dapp_id, float) and not math.isfinite(studio_dapp_id):
            # JSON has no Infinity
            studio_dapp_id = None
        document[STUDIO_DAPP_ID_KEY] = studio_dapp_id
        if self.ipfs_helia_gateways is not None:
            # always replaced wholesale, never merged with a previous list
            document[IPFS_HELIA_GATEWAYS_KEY] = list(self.ipfs_helia_gateways)
        return document

    def __eq__(self, other):
        return isinstance(other, ConfigPatch) and \
            self.studio_dapp_id == other.studio_dapp_id and \
            self.ipfs_helia_gateways == other.ipfs_helia_gateways

    def __repr__(self):
        return 'ConfigPatch(studio_dapp_id={!r}, ipfs_helia_gateways={!r})' \
            .format(self.studio_dapp_id, self.ipfs_helia_gateways)


def _reject_constant(name):
    raise ValueError('{} is not valid JSON'.format(name))


def _escape_surrogate(match):
    return '\\u{:04x}'.format(ord(match.group()))


def parse_document(raw):
    return json.loads(raw,
                      object_pairs_hook=OrderedDict,
                      parse_constant=_reject_constant)


def dump_document(document):
    text = json.dumps(document, indent=2, ensure_ascii=False) + '\n'
    # surrogate pairs were joined by the parser, so any left are unpaired
    # and cannot be encoded as UTF-8; keep them as \uXXXX escapes
    return _LONE_SURROGATE_RE.sub(_escape_surrogate, text)


def load_document(path):
    try:
        with open(path, 'r', encoding='utf-8') as f:
            raw = f.read()
    except (OSError, UnicodeDecodeError) as e:
        return Failure(ConfigReadError('cannot read {}: {}'.format(path, e)))

    try:
        document = parse_document(raw)
    except ValueError as e:
        return Failure(ConfigParseError('cannot parse {}: {}'.format(path, e)))

    if not isinstance(document, dict):
        return Failure(NotAJsonObject(path, type(document).__name__))
    return Success(document)


def write_document(path, document):
    # encode before opening, opening for write truncates the file
    try:
        data = dump_document(document).encode('utf-8')
    except (UnicodeEncodeError, ValueError) as e:
        return Failure(ConfigWriteError('cannot encode {}: {}'.format(path, e)))

    try:
        with open(path, 'wb') as f:
            f.write(data)
    except OSError as e:
        return Failure(ConfigWriteError('cannot write {}: {}'.format(path, e)))
    return Success(path)


def patch_config_file(file, patch):
    """Read the JSON object at ``file``, apply ``patch`` and write it back.

    The path is resolved against the current working directory. The
    previous contents are overwritten in place, without a backup.
    Returns Success(resolved_path) or Failure(DataError).
    """
    path = os.path.abspath(file)
    logger.debug('reading %s', path)

    loaded = load_document(path)
    if not loaded.ok:
        return loaded

    document = patch.apply(loaded.value)
    logger.debug('writing %s with %r', path, patch)
    return write_document(path, document)
