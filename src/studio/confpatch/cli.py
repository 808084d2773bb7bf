import argparse
import logging
import sys

from studio.confpatch.args import (
    DEBUG,
    FILE,
    IPFS_HELIA_GATEWAY,
    STUDIO_DAPP_ID,
    parse_args,
)
from studio.confpatch.configured_logger import new_logger
from studio.confpatch.patch import format_number, patch_config_file
from studio.confpatch.result import UsageError
from studio.confpatch.validate import validate

SET_STUDIO_DAPP_ID_USAGE = \
    'Usage: set-devnet-studio-dapp-id --file <path> --studio-dapp-id <uint>'
UPDATE_CONFIG_FOR_E2E_USAGE = \
    'Usage: update-config-for-e2e --file <path> --studio-dapp-id <uint> ' \
    '--ipfs-helia-gateway <url>'


def _run_tool(argv, flags, usage):
    """Parse, validate and patch; returns (exit status, ConfigPatch, path)."""
    args = parse_args(argv, flags)
    log = new_logger(level=logging.DEBUG if args[DEBUG] else logging.INFO)

    validated = validate(args, flags)
    if not validated.ok:
        if isinstance(validated.error, UsageError):
            print(usage, file=sys.stderr)
        else:
            log.error('%s', validated.error)
        return validated.error.exit_code, None, None

    patch = validated.value
    patched = patch_config_file(args[FILE], patch)
    if not patched.ok:
        log.error('%s', patched.error)
        return patched.error.exit_code, None, None

    return 0, patch, patched.value


def set_studio_dapp_id(argv):
    """Set studioDappId in a JSON config file"""
    status, patch, path = _run_tool(
        argv,
        (FILE, STUDIO_DAPP_ID),
        SET_STUDIO_DAPP_ID_USAGE,
    )
    if status == 0:
        print('Updated {} with studioDappId={}'.format(
            path, format_number(patch.studio_dapp_id)))
    return status


def update_config_for_e2e(argv):
    """Set studioDappId and ipfsHeliaGateways for E2E runs"""
    status, patch, path = _run_tool(
        argv,
        (FILE, STUDIO_DAPP_ID, IPFS_HELIA_GATEWAY),
        UPDATE_CONFIG_FOR_E2E_USAGE,
    )
    if status == 0:
        print('Updated {} with studioDappId={} and ipfsHeliaGateway={}'.format(
            path, format_number(patch.studio_dapp_id),
            patch.ipfs_helia_gateways[0]))
    return status


COMMANDS = {
    'set_studio_dapp_id': set_studio_dapp_id,
    'update_config_for_e2e': update_config_for_e2e,
}


class MultiCommandParser(object):
    def __init__(self, argv=None):
        if argv is None:
            argv = sys.argv[1:]
        self.parser = argparse.ArgumentParser(
            prog='studio-config',
            usage="""studio-config <command> [<args>]

Commands:
set_studio_dapp_id        {}
update_config_for_e2e     {}
            """.format(
                set_studio_dapp_id.__doc__,
                update_config_for_e2e.__doc__,
            )
        )
        self.parser.add_argument('command', help='Command to run')
        # only the command name goes through argparse, the command's own
        # tokens are scanned by the command itself
        self.command = self.parser.parse_args(argv[:1]).command
        self.command_args = argv[1:]

    def run(self):
        command = COMMANDS.get(self.command)
        if command is None:
            print("Unrecognized command: {}\n".format(self.command),
                  file=sys.stderr)
            self.parser.print_help(sys.stderr)
            return 1
        return command(self.command_args)


def run():
    sys.exit(MultiCommandParser().run())


def run_set_studio_dapp_id():
    sys.exit(set_studio_dapp_id(sys.argv[1:]))


def run_update_config_for_e2e():
    sys.exit(update_config_for_e2e(sys.argv[1:]))


if __name__ == "__main__":
    run()
