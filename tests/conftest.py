from studio.confpatch.test_utils.fixtures import *  # noqa: F401,F403
