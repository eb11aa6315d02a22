#!/usr/bin/env python3

"""vrfglass is a route lookup front end for BGP/BMP route collectors which
keep several routing instances (VRFs) apart by route distinguisher. It
discovers routers and routing instances from the collector API and builds
canonical, shareable lookup queries."""

import setuptools

setuptools.setup(
    name="vrfglass",
    version="0.1",
    packages=[
        "vrfglass",
        "vrfglass.web",
    ],
    author="Fritz Grimpen",
    author_email="fritz@grimpen.net",
    license="http://opensource.org/licenses/MIT",
    description="Route lookup front end for multi-VRF route collectors",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Operating System :: POSIX",
        "Programming Language :: Python :: 3 :: Only",
        "Topic :: System :: Networking",
        "Topic :: System :: Systems Administration"
    ],
    long_description=__doc__,
    python_requires=">=3.8",
    install_requires=[
        "netaddr",
        "httpx",
        "flask",
        "jinja2",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "vrfglass = vrfglass.tool:main",
            "vrfglass-web = vrfglass.web.__main__:main",
        ]
    },
    package_data={
        "vrfglass.web": ["templates/*.html"],
    }
)
