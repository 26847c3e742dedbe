"""
Setup script for the One Link digital wallet.

Installs the package with setuptools. Run ``python setup.py py2app`` to
create a macOS app bundle.
"""

import sys
from setuptools import setup, find_packages

APP = ['main.py']
DATA_FILES = []
OPTIONS = {
    'argv_emulation': False,  # Avoids the Carbon framework dependency
    'plist': {
        'CFBundleName': 'One Link',
        'CFBundleDisplayName': 'One Link',
        'CFBundleGetInfoString': 'Digital wallet prototype',
        'CFBundleIdentifier': 'com.onelink.digitalwalletprototype',
        'CFBundleVersion': '1.0.0',
        'CFBundleShortVersionString': '1.0.0',
        'NSHighResolutionCapable': True,
    },
    'packages': ['PyQt5'],
}

bundle_options = {}
if 'py2app' in sys.argv:
    bundle_options = dict(
        app=APP,
        data_files=DATA_FILES,
        options={'py2app': OPTIONS},
        setup_requires=['py2app'],
    )

setup(
    name='digital-wallet-prototype',
    version='1.0.0',
    description='One Link digital wallet prototype',
    package_dir={'': 'src'},
    packages=find_packages('src'),
    python_requires='>=3.8',
    install_requires=['PyQt5>=5.15'],
    extras_require={'test': ['pytest']},
    entry_points={
        'gui_scripts': ['digital-wallet = digital_wallet.main:main'],
    },
    **bundle_options
)
