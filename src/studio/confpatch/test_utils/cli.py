import json
import shlex
import sys

import delegator


class CliHelpers(object):
    def __init__(self, cwd=None):
        self._cwd = cwd

    def run(self, command, *args):
        command = "{} -m studio.confpatch.cli {} {}".format(
            shlex.quote(sys.executable),
            command,
            ' '.join(shlex.quote(str(arg)) for arg in args),
        )
        return delegator.run(command, cwd=self._cwd)

    def run_command(self, command, *args):
        process = self.run(command, *args)
        assert process.return_code == 0, process.err
        return process.out

    def set_studio_dapp_id(self, path, studio_dapp_id):
        return self.run_command(
            'set_studio_dapp_id',
            '--file', path,
            '--studio-dapp-id', studio_dapp_id,
        )

    def update_config_for_e2e(self, path, studio_dapp_id, gateway):
        return self.run_command(
            'update_config_for_e2e',
            '--file', path,
            '--studio-dapp-id', studio_dapp_id,
            '--ipfs-helia-gateway', gateway,
        )

    @staticmethod
    def read_config(path):
        with open(str(path), encoding='utf-8') as f:
            return json.load(f)
