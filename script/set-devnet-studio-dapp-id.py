#!/usr/bin/env python
# Usage: python script/set-devnet-studio-dapp-id.py --file <path> --studio-dapp-id <uint>

from studio.confpatch.cli import run_set_studio_dapp_id

if __name__ == '__main__':
    run_set_studio_dapp_id()
