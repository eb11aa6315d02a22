# coding: utf-8

import collections

import netaddr

EXPECTED_FORMATS = """expecting a route distinguisher in one of the following formats:
Type0: "{2-byte ASN}:{4-byte value}" (example: 2222:1000000)
Type1: "{4-byte IP}:{2-byte value}" (example: 1.2.3.4:555)
Type2: "{4-byte ASN}:{2-byte value}" (example: 1000000:3232)"""

MAX_U16 = 0xffff
MAX_U32 = 0xffffffff


class RouteDistinguisher(collections.namedtuple("RouteDistinguisher",
                                                ["type", "administrator",
                                                 "value"])):
    """ Route distinguisher in text notation. type is None for the default
    routing instance 0:0. """
    __slots__ = ()

    @property
    def is_default(self):
        return self.type is None

    @property
    def type_name(self):
        if self.type is None:
            return "default"
        return "type{}".format(self.type)

    def __str__(self):
        if self.type is None:
            return "0:0"
        return "{}:{}".format(self.administrator, self.value)


DEFAULT = RouteDistinguisher(None, 0, 0)


def parse(string):
    if string == "0:0":
        return DEFAULT
    administrator, sep, value = string.partition(":")
    if not sep or not value.isdigit():
        raise ValueError(EXPECTED_FORMATS)
    value = int(value)
    if value > MAX_U32:
        raise ValueError(EXPECTED_FORMATS)

    if administrator.isdigit():
        asn = int(administrator)
        if asn <= MAX_U16:
            return RouteDistinguisher(0, asn, value)
        elif asn <= MAX_U32 and value <= MAX_U16:
            return RouteDistinguisher(2, asn, value)
        raise ValueError(EXPECTED_FORMATS)

    if netaddr.valid_ipv4(administrator) and value <= MAX_U16:
        return RouteDistinguisher(1, netaddr.IPAddress(administrator), value)
    raise ValueError(EXPECTED_FORMATS)


def type_name(string):
    """ Returns the RD type of string, or None if string is no RD in text
    notation. """
    try:
        return parse(string).type_name
    except ValueError:
        return None
