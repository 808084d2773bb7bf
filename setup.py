from setuptools import find_packages, setup

tests_require = [
    'delegator.py>=0.1.1',
    'pytest>=4.3.0',
]

setup(
    name='studio.confpatch',
    version='0.1.0',
    packages=find_packages('src'),
    package_dir={'': 'src'},
    python_requires='>=3.6',
    install_requires=[],
    entry_points='''
        [console_scripts]
        studio-config=studio.confpatch.cli:run
        set-devnet-studio-dapp-id=studio.confpatch.cli:run_set_studio_dapp_id
        update-config-for-e2e=studio.confpatch.cli:run_update_config_for_e2e
    ''',
    extras_require={
        'test_utils': tests_require,
    }
)
