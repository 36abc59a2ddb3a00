"""
A2S_INFO payload parsers

Source and GoldSource servers answer A2S_INFO with different layouts.
The client picks the parser from the response type byte it matched.
"""

import logging

from ..exceptions import ShortResponseError
from ..models import ServerInfo
from ..protocol.binary_reader import BinaryReader
from ..protocol.constants import (
    EDF_GAME_ID,
    EDF_KEYWORDS,
    EDF_PORT,
    EDF_SOURCE_TV,
    EDF_STEAM_ID,
    SOURCE_INFO_MIN_SIZE,
)

logger = logging.getLogger(__name__)


def parse_source_info(data: bytes) -> ServerInfo:
    """
    Parse an A2S_INFO payload from a Source server (response type 'I').

    Format:
        protocol(1) name\\0 map\\0 folder\\0 game\\0 appid(2)
        players(1) max_players(1) bots(1)
        server_type(1) environment(1) visibility(1) vac(1)
        version\\0 [edf(1) + optional fields]

    Optional fields behind the EDF byte are read independently; one that
    is cut short is left at zero and parsing carries on.
    """
    if len(data) < SOURCE_INFO_MIN_SIZE:
        raise ShortResponseError()

    reader = BinaryReader(data)
    info = ServerInfo()

    info.protocol = reader.read_byte()
    info.name = reader.read_string()
    info.map = reader.read_string()
    info.folder = reader.read_string()
    info.game = reader.read_string()

    if reader.has_data(2):
        info.app_id = reader.read_uint16()

    if not reader.has_data(3):
        raise ShortResponseError()
    info.players = reader.read_byte()
    info.max_players = reader.read_byte()
    info.bots = reader.read_byte()

    if not reader.has_data(4):
        raise ShortResponseError()
    info.server_type = reader.read_byte()
    info.environment = reader.read_byte()
    info.visibility = reader.read_byte()
    info.vac = reader.read_byte()

    info.version = reader.read_string()

    if reader.has_data(1):
        info.edf = reader.read_byte()
        _parse_extra_data(reader, info)

    return info


def _parse_extra_data(reader: BinaryReader, info: ServerInfo) -> None:
    edf = info.edf

    if edf & EDF_PORT and reader.has_data(2):
        info.game_port = reader.read_uint16()

    if edf & EDF_STEAM_ID and reader.has_data(8):
        info.steam_id = reader.read_uint64()

    if edf & EDF_SOURCE_TV and reader.has_data(2):
        info.source_tv.port = reader.read_uint16()
        info.source_tv.name = reader.read_string()

    if edf & EDF_KEYWORDS:
        # Keywords are consumed but not kept
        reader.read_string()

    if edf & EDF_GAME_ID and reader.has_data(8):
        info.game_id = reader.read_uint64()


def parse_goldsource_info(data: bytes) -> ServerInfo:
    """
    Parse an A2S_INFO payload from a GoldSource server (response type 'm').

    Format:
        address\\0 name\\0 map\\0 folder\\0 game\\0
        players(1) max_players(1) protocol(1)
        server_type(1) environment(1) visibility(1) mod(1)
        [link\\0 download_link\\0 nul(1) version(4) size(4) type(1) dll(1)]
        vac(1) [bots(1)]

    The address and the mod block are consumed but not kept. Every read
    is bounds-checked, so a truncated payload raises ShortResponseError.
    """
    reader = BinaryReader(data)
    info = ServerInfo(is_goldsource=True)

    reader.read_string()  # address
    info.name = reader.read_string()
    info.map = reader.read_string()
    info.folder = reader.read_string()
    info.game = reader.read_string()

    if not reader.has_data(2):
        raise ShortResponseError()
    info.players = reader.read_byte()
    info.max_players = reader.read_byte()

    info.protocol = reader.read_byte()
    info.server_type = reader.read_byte()
    info.environment = reader.read_byte()
    info.visibility = reader.read_byte()

    mod = reader.read_byte()
    if mod == 1:
        reader.read_string()  # mod link
        reader.read_string()  # mod download link
        reader.skip(1)  # nul
        reader.skip(4)  # mod version
        reader.skip(4)  # mod size
        reader.skip(1)  # multiplayer only
        reader.skip(1)  # custom dll

    info.vac = reader.read_byte()

    if reader.has_data(1):
        info.bots = reader.read_byte()

    logger.debug(f"GoldSource info for '{info.name}' (mod={mod})")
    return info
