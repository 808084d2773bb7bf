#!/usr/bin/env python
# Usage: python script/updateConfigForE2E.py --file <path> --studio-dapp-id <uint> --ipfs-helia-gateway <url>

from studio.confpatch.cli import run_update_config_for_e2e

if __name__ == '__main__':
    run_update_config_for_e2e()
