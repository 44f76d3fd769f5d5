"""Pytest configuration and fixtures."""

import io
import logging

import pytest

from hexhash.config.settings import get_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Keep HEXHASH_* variables from the host out of the settings cache."""
    monkeypatch.delenv("HEXHASH_LOG_LEVEL", raising=False)
    monkeypatch.delenv("HEXHASH_LOG_FILE", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers the CLI attaches to the package logger."""
    yield
    logger = logging.getLogger("hexhash")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def stdin(monkeypatch: pytest.MonkeyPatch):
    """Replace sys.stdin with the given raw bytes."""

    def feed(data: bytes) -> None:
        monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(data)))

    return feed


@pytest.fixture
def abc_vectors() -> dict[str, str]:
    """Digests of b"abc" for every registered algorithm."""
    return {
        "md5": "0x900150983cd24fb0d6963f7d28e17f72",
        "sha1": "0xa9993e364706816aba3e25717850c26c9cd0d89d",
        "sha2_224": "0x23097d223405d8228642a477bda255b32aadbce4bda0b3f7e36c9da7",
        "sha2_256": "0xba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad",
        "sha2_384": "0xcb00753f45a35e8bb5a03d699ac65007272c32ab0eded1631a8b605a43ff5bed"
        "8086072ba1e7cc2358baeca134c825a7",
        "sha2_512": "0xddaf35a193617abacc417349ae20413112e6fa4e89a97ea20a9eeee64b55d39a"
        "2192992a274fc1a836ba3c23a3feebbd454d4423643ce80e2a9ac94fa54ca49f",
        "sha2_512_224": "0x4634270f707b6a54daae7530460842e20e37ed265ceee9a43e8924aa",
        "sha2_512_256": "0x53048e2681941ef99b2e29b76b4c7dabe4c2d0c634fc6d46e0e2f13107e7af23",
        "sha3_224": "0xe642824c3f8cf24ad09234ee7d3c766fc9a3a5168d0c94ad73b46fdf",
        "sha3_256": "0x3a985da74fe225b2045c172d6bd390bd855f086e3e9d525b46bfe24511431532",
        "sha3_384": "0xec01498288516fc926459f58e2c6ad8df9b473cb0fc08c2596da7cf0e49be4b2"
        "98d88cea927ac7f539f1edf228376d25",
        "sha3_512": "0xb751850b1a57168a5693cd924b6b096e08f621827444f70d884f5d0240d2712e"
        "10e116e9192af3c91a7ec57647e3934057340b4cf408d5a56592f8274eec53f0",
        "sha3_k_224": "0xc30411768506ebe1c2871b1ee2e87d38df342317300a9b97a95ec6a8",
        "sha3_k_256": "0x4e03657aea45a94fc7d47ba826c8d667c0d1e6e33a64a036ec44f58fa12d6c45",
        "sha3_k_384": "0xf7df1165f033337be098e7d288ad6a2f74409d7a60b49c36642218de161b1f99"
        "f8c681e4afaf31a34db29fb763e3c28e",
        "sha3_k_512": "0x18587dc2ea106b9a1563e32b3312421ca164c7f1f07bc922a9c83d77cea3a1e5"
        "d0c69910739025372dc14ac9642629379540c17e2a65b19d77aa511a9d00bb96",
        "ripemd_160": "0x8eb208f7e05d987a9b044a8e98c6b087f15a0bfc",
    }


@pytest.fixture
def empty_vectors() -> dict[str, str]:
    """Digests of the empty message for every registered algorithm."""
    return {
        "md5": "0xd41d8cd98f00b204e9800998ecf8427e",
        "sha1": "0xda39a3ee5e6b4b0d3255bfef95601890afd80709",
        "sha2_224": "0xd14a028c2a3a2bc9476102bb288234c415a2b01f828ea62ac5b3e42f",
        "sha2_256": "0xe3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855",
        "sha2_384": "0x38b060a751ac96384cd9327eb1b1e36a21fdb71114be07434c0cc7bf63f6e1da"
        "274edebfe76f65fbd51ad2f14898b95b",
        "sha2_512": "0xcf83e1357eefb8bdf1542850d66d8007d620e4050b5715dc83f4a921d36ce9ce"
        "47d0d13c5d85f2b0ff8318d2877eec2f63b931bd47417a81a538327af927da3e",
        "sha2_512_224": "0x6ed0dd02806fa89e25de060c19d3ac86cabb87d6a0ddd05c333b84f4",
        "sha2_512_256": "0xc672b8d1ef56ed28ab87c3622c5114069bdd3ad7b8f9737498d0c01ecef0967a",
        "sha3_224": "0x6b4e03423667dbb73b6e15454f0eb1abd4597f9a1b078e3f5b5a6bc7",
        "sha3_256": "0xa7ffc6f8bf1ed76651c14756a061d662f580ff4de43b49fa82d80a4b80f8434a",
        "sha3_384": "0x0c63a75b845e4f7d01107d852e4c2485c51a50aaaa94fc61995e71bbee983a2a"
        "c3713831264adb47fb6bd1e058d5f004",
        "sha3_512": "0xa69f73cca23a9ac5c8b567dc185a756e97c982164fe25859e0d1dcc1475c80a6"
        "15b2123af1f5f94c11e3e9402c3ac558f500199d95b6d3e301758586281dcd26",
        "sha3_k_224": "0xf71837502ba8e10837bdd8d365adb85591895602fc552b48b7390abd",
        "sha3_k_256": "0xc5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470",
        "sha3_k_384": "0x2c23146a63a29acf99e73b88f8c24eaa7dc60aa771780ccc006afbfa8fe2479b"
        "2dd2b21362337441ac12b515911957ff",
        "sha3_k_512": "0x0eab42de4c3ceb9235fc91acffe746b29c29a8c366b7c60e4e67c466f36a4304"
        "c00fa9caf9d87976ba469bcbe06713b435f091ef2769fb160cdab33d3670680e",
        "ripemd_160": "0x9c1185a5c5e9fc54612808977ee8f548b2258d31",
    }
