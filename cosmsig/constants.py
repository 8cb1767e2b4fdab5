# -*- coding: utf-8 -*-
#
# cosmsig - Cosmos SDK signature encoding
# Copyright (C) 2018 The Electrum developers
# Copyright (C) 2024 The cosmsig developers
#
# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

from typing import Type


class AbstractNet:

    NET_NAME: str
    TESTNET: bool
    BECH32_PREFIX: str
    BECH32_PUBKEY_PREFIX: str

    @classmethod
    def set_as_network(cls) -> None:
        global net
        net = cls


class CosmosHubMainnet(AbstractNet):

    NET_NAME = "cosmoshub"
    TESTNET = False
    BECH32_PREFIX = "cosmos"
    BECH32_PUBKEY_PREFIX = "cosmospub"


class CosmosHubTestnet(AbstractNet):

    NET_NAME = "theta-testnet"
    TESTNET = True
    BECH32_PREFIX = "cosmos"
    BECH32_PUBKEY_PREFIX = "cosmospub"


class SimappLocalnet(AbstractNet):

    NET_NAME = "simapp"
    TESTNET = True
    BECH32_PREFIX = "simapp"
    BECH32_PUBKEY_PREFIX = "simapppub"


# don't import net directly, import the module instead (so that net is singleton)
net = CosmosHubMainnet  # type: Type[AbstractNet]
