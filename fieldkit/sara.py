"""Response handling for AT queries to a cellular modem with GNSS."""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import NamedTuple

from fieldkit.atparser import FieldType, parse_text_fields

logger = logging.getLogger(__name__)

# GNSS power management (+UGPS): mode
UGPS_MODE_OFF = 0
UGPS_MODE_ON = 1

# +UGPS: aid_mode
UGPS_AID_MODE_OFF = 0
UGPS_AID_MODE_LOCAL = 1
UGPS_AID_MODE_ASSISTNOW_AUTONOMOUS = 8

# +UGPS: GNSS_systems
UGPS_GNSS_SYSTEM_GPS = 1
UGPS_GNSS_SYSTEM_SBAS = 2
UGPS_GNSS_SYSTEM_GALILEO = 4
UGPS_GNSS_SYSTEM_GLONASS = 64

# Radio access technology selection (+URAT): AcT
URAT_ACT_GSM = 0
URAT_ACT_LTE = 3
URAT_ACT_LTE_CAT_M1 = 7
URAT_ACT_NB_IOT = 8

# GNSS profile configuration (+UGPRF): GNSS_IO_configuration
UGPRF_GNSS_IO_NONE = 0
UGPRF_GNSS_IO_USB_OR_UART = 1
UGPRF_GNSS_IO_MUX = 2

# Serial interfaces configuration (+USIO): variant
USIO_VARIANT_0 = 0
USIO_VARIANT_2 = 2
USIO_VARIANT_4 = 4


class AtCommandResult(IntEnum):
    """Outcome of handling one modem response."""

    DONE = 0
    ERROR = 1
    CONTINUE = 2
    UNEXPECTED = 3
    TIMEOUT = 4
    OTA_DATA_SIZE_MISMATCH = 5


class CellResponseCode(IntEnum):
    """Kinds of line a modem can send; codes from URC_CODES on are notifications."""

    OK = 0
    AT = 1
    ATE0 = 2
    ERROR = 3
    CME_ERROR = 4
    SIM_READY = 5
    PHONE_READY = 6
    GSM_REG_STATUS = 7
    LTE_REG_STATUS = 8
    GPRS_REG_STATUS = 9
    TCP_STACK_IDLE = 10
    TCP_STACK_START = 11
    TCP_STACK_CONFIG = 12
    TCP_STACK_ACTIVATING = 13
    TCP_STACK_GPRS_ACTIVATED = 14
    TCP_STACK_IP_ADDRESS = 15
    TCP_STACK_TCP_CONNECTING = 16
    TCP_STACK_TCP_CLOSED = 17
    TCP_STACK_TCP_CONNECTED = 18
    TCP_STACK_GPRS_DEACTIVATED = 19
    SSL_CERT_INCORRECT = 20
    SSL_CERT_CORRECT = 21
    CONNECTION_STATE = 22
    DATA_RECEIVED = 23
    DATA_RECEIVED_FOR_TCP = 24
    SEND_OK = 25
    SEND_FAIL = 26
    CLOSE_OK = 27
    DEACT_OK = 28
    CONNECT = 29
    CNUM = 30
    MULTISLOT_CLASS = 31
    CCID = 32
    CGSN = 33
    FW_VER = 34
    QNITZ = 35
    CTZU = 36
    CCLK = 37
    GOT_IP_ADDRESS = 38
    LTE_GNSS_PRIO = 39
    GNSS_STATE = 40
    IOT_MODE = 41
    CSQ = 42
    UPLOAD_PACKAGE = 43
    NMEA = 44
    LOCATION = 45
    GNSS_ESTIMATED_ERROR = 46
    AGPS_STATE = 47
    GET_IP_FROM_DNS = 48
    GNSS_CONSTELLATION = 49
    QCSQ = 50
    QNWINFO = 51
    QPTWEDRXS = 52
    XTRA_TIME = 53
    XTRA_INFO = 54
    XTRA_AUTO_DOWNLOAD = 55
    URC_CODES = 56
    URC_CONNECTION_CLOSED = 56
    URC_CONNECTION_EVENT = 57
    URC_DATA_RECEIVED = 58
    URC_DATA_RECEIVED_FOR_TCP = 59
    URC_NORMAL_POWER_DOWN = 60
    URC_PDP_DEACT = 61
    URC_TCP_CONNECTION_EVENT = 62
    URC_TCP_CONNECTION_CLOSED = 63
    URC_OTA_START_DOWNLOAD = 64
    URC_OTA_DOWNLOADING = 65
    URC_OTA_DOWNLOADED = 66
    URC_OTA_RESETTING = 67
    URC_OTA_UPDATE = 68
    URC_OTA_UPDATING = 69
    URC_OTA_UPDATED = 70
    LENGTH = 71
    UNKNOWN = 72
    NONE = 73

    @property
    def is_urc(self) -> bool:
        """True for unsolicited notifications from the modem."""
        return CellResponseCode.URC_CODES <= self < CellResponseCode.LENGTH


class ResponseEntry(NamedTuple):
    code: CellResponseCode
    text: str


_C = CellResponseCode

RESPONSE_TABLE: tuple[ResponseEntry, ...] = tuple(
    ResponseEntry(code, text)
    for code, text in (
        (_C.OK, "OK"),
        (_C.AT, "AT\r"),
        (_C.ATE0, "ATE0"),
        (_C.ERROR, "ERROR"),
        (_C.CME_ERROR, "+CME ERROR:"),
        (_C.SIM_READY, "+CPIN: READY"),
        (_C.PHONE_READY, "+CFUN:1"),
        (_C.GSM_REG_STATUS, "+CREG:"),
        (_C.LTE_REG_STATUS, "+CEREG:"),
        (_C.GPRS_REG_STATUS, "+CGREG:"),
        (_C.TCP_STACK_IDLE, "STATE: IP INITIAL"),
        (_C.TCP_STACK_START, "STATE: IP START"),
        (_C.TCP_STACK_CONFIG, "STATE: IP CONFIG"),
        (_C.TCP_STACK_ACTIVATING, "STATE: IP IND"),
        (_C.TCP_STACK_GPRS_ACTIVATED, "STATE: IP GPRSACT"),
        (_C.TCP_STACK_IP_ADDRESS, "STATE: IP STATUS"),
        (_C.TCP_STACK_TCP_CONNECTING, "STATE: TCP CONNECTING"),
        (_C.TCP_STACK_TCP_CLOSED, "STATE: IP CLOSE"),
        (_C.TCP_STACK_TCP_CONNECTED, "STATE: CONNECT OK"),
        (_C.TCP_STACK_GPRS_DEACTIVATED, "STATE: PDP DEACT"),
        (_C.SSL_CERT_INCORRECT, "+QSECREAD: 0,"),
        (_C.SSL_CERT_CORRECT, "+QSECREAD: 1,"),
        (_C.CONNECTION_STATE, "+QSSLSTATE: "),
        (_C.DATA_RECEIVED, "+QSSLRECV: "),
        (_C.DATA_RECEIVED_FOR_TCP, "+QIRD: "),
        (_C.SEND_OK, "SEND OK"),
        (_C.SEND_FAIL, "SEND FAIL"),
        (_C.CLOSE_OK, "CLOSE OK"),
        (_C.DEACT_OK, "DEACT OK"),
        (_C.CONNECT, "CONNECT"),
        (_C.CNUM, "+CNUM:"),
        (_C.MULTISLOT_CLASS, "MULTISLOT CLASS:"),
        (_C.CCID, "+QCCID:"),
        (_C.CGSN, "AT+CGSN"),
        (_C.FW_VER, "AT+QGMR"),
        (_C.QNITZ, "+QNITZ:"),
        (_C.CTZU, "+CTZU:"),
    )
)

UBLOX_RESPONSE_TABLE: tuple[ResponseEntry, ...] = (
    ResponseEntry(_C.OK, "OK"),
    ResponseEntry(_C.ERROR, "ERROR"),
    ResponseEntry(_C.CME_ERROR, "+CME ERROR:"),
)


def lookup_response(
    text: str, table: tuple[ResponseEntry, ...] = RESPONSE_TABLE
) -> CellResponseCode:
    """Return the code of the first table entry that ``text`` starts with.

    Text that matches no entry is ``CellResponseCode.UNKNOWN``.
    """
    return next(
        (entry.code for entry in table if text.startswith(entry.text)),
        CellResponseCode.UNKNOWN,
    )


@dataclass
class GnssStatus:
    """Fields of a +UGPS response."""

    mode: int = UGPS_MODE_OFF
    aid_mode: int = UGPS_AID_MODE_OFF
    gnss_systems: int = 0


def _final_result(code: CellResponseCode) -> AtCommandResult:
    if code in (CellResponseCode.ERROR, CellResponseCode.CME_ERROR):
        return AtCommandResult.ERROR
    return AtCommandResult.CONTINUE


@dataclass
class FwVersionQuery:
    """Collects the firmware version reported by the modem."""

    firmware_version: str = ""

    def handle(self, code: CellResponseCode, response: str) -> AtCommandResult:
        """Process one response line and say whether the query is finished."""
        if code is CellResponseCode.UNKNOWN:
            values = parse_text_fields(response, None, [FieldType.STRING])
            if len(values) == 1:
                self.firmware_version = str(values[0])
                logger.info("| <fw_ver> = %s", self.firmware_version)
            return AtCommandResult.CONTINUE
        if code is CellResponseCode.OK:
            if self.firmware_version:
                return AtCommandResult.DONE
            return AtCommandResult.ERROR
        return _final_result(code)


@dataclass
class GnssStatusQuery:
    """Collects the GNSS power state reported in a +UGPS response."""

    status: GnssStatus = field(default_factory=GnssStatus)

    HEADER = "+UGPS:"

    def handle(self, code: CellResponseCode, response: str) -> AtCommandResult:
        """Process one response line and say whether the query is finished."""
        if code is CellResponseCode.UNKNOWN:
            names = ("mode", "aid_mode", "gnss_systems")
            values = parse_text_fields(
                response, self.HEADER, [FieldType.NUMBER] * len(names)
            )
            for name, value in zip(names, values):
                setattr(self.status, name, value)
            if len(values) == len(names):
                logger.info("| <mode> = %u", self.status.mode)
                logger.info("| <aid_mode> = %u", self.status.aid_mode)
                logger.info("| <GNSS_systems> = %u", self.status.gnss_systems)
            return AtCommandResult.CONTINUE
        if code is CellResponseCode.OK:
            return AtCommandResult.DONE
        return _final_result(code)


def main(argv: list[str] | None = None) -> int:
    """Run both queries against sample responses and print what they parse."""
    parser = argparse.ArgumentParser(
        prog="fieldkit-sara",
        description="Parse sample modem responses.",
    )
    parser.parse_args(argv)

    print("Test 1:")
    fw_query = FwVersionQuery()
    fw_query.handle(CellResponseCode.UNKNOWN, "02.06")
    if fw_query.firmware_version:
        print(f"| <fw_ver> = {fw_query.firmware_version}")

    print("Test 2:")
    gnss_query = GnssStatusQuery()
    gnss_query.handle(CellResponseCode.UNKNOWN, "+UGPS: 1,0,1")
    status = gnss_query.status
    print(f"| <mode> = {status.mode}")
    print(f"| <aid_mode> = {status.aid_mode}")
    print(f"| <GNSS_systems> = {status.gnss_systems}")
    return 0