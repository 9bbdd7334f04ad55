###############################################################################
#          Copyright (c) 2022 Rockwell Automation Technologies, Inc.          #
#                            All rights reserved.                             #
###############################################################################
"""
Setup for the CIP path encoders.
"""
from setuptools import setup

setup(
    name='scapy-cip-path',
    version='0.0.1',
    packages=['scapy_cip_path',
              'scapy_cip_path_common', ],
    install_requires=["hexdump", "scapy"],
    extras_require={"tests": ["pytest"]})
