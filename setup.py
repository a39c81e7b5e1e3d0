import os

import setuptools

# Make sure that README.md decodes in environments that use the C locale
# (which implies ASCII), by explicitly giving the encoding.
with open(os.path.join(os.path.dirname(__file__), "README.md"), encoding="utf-8") as f:
    long_description = f.read()


setuptools.setup(
    name="vitality",
    # MAJOR.MINOR.PATCH, per http://semver.org
    version="2.0.0",
    description="Focus events and insert-mode cursor shapes for terminal Vim "
    "in iTerm2, mintty and Terminal.app, with or without tmux",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="vitality contributors",
    keywords="vim, terminal, iterm2, mintty, tmux, escape sequences, focus",
    license="ISC",
    py_modules=(
        "vitality",
        "vimscript",
        "focusprobe",
    ),
    entry_points={
        "console_scripts": (
            "vitality-vimrc = vimscript:main",
            "vitality-probe = focusprobe:main",
        )
    },
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.6",
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "Topic :: Text Editors",
        "Topic :: Terminals",
        "License :: OSI Approved :: ISC License (ISCL)",
        "Operating System :: POSIX",
        "Operating System :: MacOS :: MacOS X",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.6",
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: Implementation :: CPython",
        "Programming Language :: Python :: Implementation :: PyPy",
    ],
)
