import pytest

from rflink_checksum.pipeline.stages.check import stage as check_stage
from rflink_checksum.pipeline.stages.check.modules.add8 import Config as Add8Config
from rflink_checksum.pipeline.stages.check.modules.crc import Config as CrcConfig
from rflink_checksum.pipeline.stages.check.modules.lfsr8 import Config as Lfsr8Config
from rflink_checksum.pipeline.stages.check.modules.xor8 import Config as Xor8Config


def test_available_modules():
    assert check_stage.available_modules() == ["add8", "crc", "lfsr8", "xor8"]


@pytest.mark.parametrize(
    "cfg",
    [
        check_stage.Config(),
        check_stage.Config(module="crc", module_cfg=CrcConfig(algorithm="CRC-8/MAXIM-DOW")),
        check_stage.Config(module="crc", module_cfg=CrcConfig(algorithm="CRC-16/MODBUS"), byteorder="little"),
        check_stage.Config(module="lfsr8", module_cfg=Lfsr8Config(gen=0x31, key=0xF4)),
        check_stage.Config(module="xor8", module_cfg=Xor8Config()),
        check_stage.Config(module="add8", module_cfg=Add8Config(offset=0x10)),
    ],
)
def test_check_roundtrip_and_bit_flip(cfg):
    body = b"\x2d\xd4sensor-frame\x00\x7f"
    frame = check_stage.tx(body, cfg=cfg)
    assert check_stage.rx(frame, cfg=cfg) == body

    corrupted = bytearray(frame)
    corrupted[2] ^= 0x01
    with pytest.raises(ValueError, match="check value mismatch"):
        check_stage.rx(bytes(corrupted), cfg=cfg)


def test_default_crc_appends_ccitt_false_big_endian():
    frame = check_stage.tx(b"123456789", cfg=check_stage.Config())
    assert frame == b"123456789\x29\xb1"


def test_modbus_little_endian_trailer():
    cfg = check_stage.Config(module_cfg=CrcConfig(algorithm="CRC-16/MODBUS"), byteorder="little")
    assert check_stage.tx(b"123456789", cfg=cfg)[-2:] == b"\x37\x4b"


def test_custom_crc_params():
    module_cfg = CrcConfig(algorithm=None, width=8, poly=0x31, init=0x00, bit_order="lsb")
    frame = check_stage.tx(b"123456789", cfg=check_stage.Config(module_cfg=module_cfg))
    assert frame[-1] == 0xA1


def test_custom_crc_params_type_checked():
    module_cfg = CrcConfig(algorithm=None, poly="0x1021")
    with pytest.raises(TypeError, match="cfg.poly must be int"):
        check_stage.tx(b"abc", cfg=check_stage.Config(module_cfg=module_cfg))


def test_rx_frame_too_short():
    with pytest.raises(ValueError, match="frame too short"):
        check_stage.rx(b"\x01", cfg=check_stage.Config())


def test_bad_byteorder_rejected():
    with pytest.raises(ValueError, match="byteorder"):
        check_stage.tx(b"abc", cfg=check_stage.Config(byteorder="middle"))


def test_rejects_non_bytes():
    with pytest.raises(TypeError):
        check_stage.tx("abc", cfg=check_stage.Config())


def test_unknown_module():
    with pytest.raises(ModuleNotFoundError):
        check_stage.tx(b"abc", cfg=check_stage.Config(module="nope"))


@pytest.mark.parametrize("module", ["add8", "crc", "lfsr8", "xor8"])
def test_body_is_opaque_including_empty(module):
    cfg = check_stage.Config(module=module)
    for body in (b"", b"\x00", bytes(range(256))):
        frame = check_stage.tx(body, cfg=cfg)
        assert frame[:len(body)] == body
        assert check_stage.rx(frame, cfg=cfg) == body
