from rflink_checksum.protocol.crc import crc8, crc8le, crc16lsb
from rflink_checksum.protocol.crc_catalogue import CATALOGUE, CHECK_INPUT
from rflink_checksum.protocol.lfsr import lfsr_digest8
from rflink_checksum.pipeline.stages.check import stage as check_stage
from rflink_checksum.pipeline.stages.check.modules.crc import Config as CrcConfig


if __name__ == "__main__":
    for name, params in CATALOGUE.items():
        got = params.compute(CHECK_INPUT)
        status = "ok" if got == params.check else "MISMATCH"
        print(f"{name:<18} {got:#06x}  {status}")

    frame = bytes([0x45, 0x6A, 0x11, 0x20, 0x3C])
    print(f"crc8     poly=0x31 init=0x00: {crc8(frame, 0x31, 0x00):#04x}")
    print(f"crc8le   poly=0x8c init=0x00: {crc8le(frame, 0x8C, 0x00):#04x}")
    print(f"crc16lsb poly=0xa001 init=0xffff: {crc16lsb(frame, 0xA001, 0xFFFF):#06x}")
    print(f"lfsr8    gen=0x98 key=0xf1: {lfsr_digest8(frame, 0x98, 0xF1):#04x}")

    cfg = check_stage.Config(module="crc", module_cfg=CrcConfig(algorithm="CRC-8/MAXIM-DOW"))
    sealed = check_stage.tx(frame, cfg=cfg)
    print(f"sealed frame: {sealed.hex()}  rx ok: {check_stage.rx(sealed, cfg=cfg) == frame}")
