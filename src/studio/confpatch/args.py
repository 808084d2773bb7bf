"""
Token scanner for the tools' ``--flag value`` command lines.

Recognised flags always take the next token as their value, even when it
looks like another flag. Unknown tokens are skipped, repeated flags
overwrite earlier ones and a flag with nothing after it gets ''.
"""

FILE = 'file'
STUDIO_DAPP_ID = 'studio-dapp-id'
IPFS_HELIA_GATEWAY = 'ipfs-helia-gateway'
DEBUG = 'debug'


def parse_args(argv, flags, switches=(DEBUG,)):
    """Scan argv for ``--<flag> <value>`` pairs and ``--<switch>`` tokens.

    :param argv: argument tokens, without the program name.
    :param flags: option names that take a value, e.g. ``('file',)``.
    :param switches: option names that take no value.
    :return: dict with every name in flags (str, '' when absent) and
        every name in switches (bool).
    """
    out = {name: '' for name in flags}
    out.update((name, False) for name in switches)

    i = 0
    while i < len(argv):
        token = argv[i]
        name = token[2:] if token.startswith('--') else None
        if name in flags:
            out[name] = argv[i + 1] if i + 1 < len(argv) else ''
            i += 2
            continue
        if name in switches:
            out[name] = True
        i += 1

    return out
