# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Tensorstep — Tensor & Optimizer Core                                ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""
Tensorstep build configuration.

The repository root is the ``tensorstep`` package itself; ``package_dir``
maps it (and ``optim``) into place.  Pure Python, NumPy is the only
runtime dependency.

Build
-----
    pip install -e .                          # editable install
    pip install -e .[test]                    # with pytest
    python -m build                           # sdist + wheel
"""
import os

from setuptools import setup

# ── Package metadata ──
_readme = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'README.md')
try:
    with open(_readme, 'r', encoding='utf-8') as fh:
        long_description = fh.read()
except FileNotFoundError:
    long_description = ''

setup(
    name='tensorstep',
    version='0.1.0',
    author='Pictofeed, LLC',
    author_email='engineering@pictofeed.io',
    description='Minimal NumPy tensor and SGD/Adam optimizer core',
    long_description=long_description,
    long_description_content_type='text/markdown',
    license='Proprietary',

    package_dir={
        'tensorstep': '.',
        'tensorstep.optim': 'optim',
    },
    packages=[
        'tensorstep',
        'tensorstep.optim',
    ],

    python_requires='>=3.10',
    install_requires=[
        'numpy>=1.24',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
        ],
        'dev': [
            'pytest>=7.0',
        ],
    },

    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Intended Audience :: Science/Research',
        'License :: Other/Proprietary License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Topic :: Scientific/Engineering :: Artificial Intelligence',
    ],
    zip_safe=False,
)
