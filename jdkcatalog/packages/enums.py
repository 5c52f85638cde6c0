# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Enumerations describing a JDK package.

Each enum carries the lowercase api string used in catalog records and a
from_text() that maps vendor spellings ("x86_64", "osx", "sapmachine") onto
a member. Unknown text maps to NOT_FOUND so callers can apply fallbacks.
"""

from __future__ import annotations

from enum import Enum


def _key(text: str) -> str:
    return text.strip().lower().replace("-", "_").replace(" ", "_")


class Distribution(Enum):
    """JDK vendor distributions."""

    AOJ = ("aoj", "AOJ")
    AOJ_OPENJ9 = ("aoj_openj9", "AOJ OpenJ9")
    CORRETTO = ("corretto", "Corretto")
    DRAGONWELL = ("dragonwell", "Dragonwell")
    LIBERICA = ("liberica", "Liberica")
    MANDREL = ("mandrel", "Mandrel")
    OJDK_BUILD = ("ojdk_build", "OJDK Build")
    ORACLE = ("oracle", "Oracle")
    ORACLE_OPEN_JDK = ("oracle_open_jdk", "Oracle OpenJDK")
    REDHAT = ("redhat", "Red Hat")
    SAP_MACHINE = ("sap_machine", "SAP Machine")
    SEMERU = ("semeru", "Semeru")
    TEMURIN = ("temurin", "Temurin")
    TRAVA = ("trava", "Trava")
    ZULU = ("zulu", "Zulu")
    NOT_FOUND = ("not_found", "")

    def __init__(self, api_string: str, display_name: str) -> None:
        self.api_string = api_string
        self.display_name = display_name

    @classmethod
    def from_text(cls, text: str | None) -> Distribution:
        if not text:
            return cls.NOT_FOUND
        key = _key(text)
        key = _DISTRIBUTION_ALIASES.get(key, key)
        for member in cls:
            if member.api_string == key:
                return member
        return cls.NOT_FOUND


_DISTRIBUTION_ALIASES = {
    "adoptopenjdk": "aoj",
    "adopt": "aoj",
    "adoptopenjdk_openj9": "aoj_openj9",
    "openjdk": "oracle_open_jdk",
    "sapmachine": "sap_machine",
    "red_hat": "redhat",
    "zulu_community": "zulu",
    "ibm_semeru": "semeru",
}


class Bitness(Enum):
    BIT_32 = 32
    BIT_64 = 64
    NONE = 0
    NOT_FOUND = -1

    @property
    def api_string(self) -> str:
        return str(self.value) if self.value > 0 else ""


class Architecture(Enum):
    """CPU architectures, each with its bitness."""

    AARCH64 = ("aarch64", Bitness.BIT_64)
    AMD64 = ("amd64", Bitness.BIT_64)
    ARM = ("arm", Bitness.BIT_32)
    ARM64 = ("arm64", Bitness.BIT_64)
    MIPS = ("mips", Bitness.BIT_32)
    PPC = ("ppc", Bitness.BIT_32)
    PPC64 = ("ppc64", Bitness.BIT_64)
    PPC64LE = ("ppc64le", Bitness.BIT_64)
    RISCV64 = ("riscv64", Bitness.BIT_64)
    S390X = ("s390x", Bitness.BIT_64)
    SPARC = ("sparc", Bitness.BIT_32)
    SPARCV9 = ("sparcv9", Bitness.BIT_64)
    X64 = ("x64", Bitness.BIT_64)
    X86 = ("x86", Bitness.BIT_32)
    I386 = ("i386", Bitness.BIT_32)
    I586 = ("i586", Bitness.BIT_32)
    I686 = ("i686", Bitness.BIT_32)
    NONE = ("", Bitness.NONE)
    NOT_FOUND = ("not_found", Bitness.NOT_FOUND)

    def __init__(self, api_string: str, bitness: Bitness) -> None:
        self.api_string = api_string
        self.bitness = bitness

    @classmethod
    def from_text(cls, text: str | None) -> Architecture:
        if not text:
            return cls.NOT_FOUND
        key = _key(text)
        key = _ARCHITECTURE_ALIASES.get(key, key)
        for member in cls:
            if member.api_string and member.api_string == key:
                return member
        return cls.NOT_FOUND


_ARCHITECTURE_ALIASES = {
    "x86_64": "x64",
    "x86_32": "x86",
    "aarch_64": "aarch64",
    "arm32": "arm",
    "aarch32": "arm",
    "ppc64el": "ppc64le",
    "s390": "s390x",
}


class LibCType(Enum):
    GLIBC = "glibc"
    LIBC = "libc"
    MUSL = "musl"
    C_STD_LIB = "c_std_lib"
    NONE = ""
    NOT_FOUND = "not_found"

    @property
    def api_string(self) -> str:
        return self.value

    @classmethod
    def from_text(cls, text: str | None) -> LibCType:
        if not text:
            return cls.NOT_FOUND
        key = _key(text)
        for member in cls:
            if member.value and member.value == key:
                return member
        return cls.NOT_FOUND


class OperatingSystem(Enum):
    """Operating systems, each with the C library it ships with."""

    ALPINE_LINUX = ("alpine_linux", LibCType.MUSL)
    LINUX = ("linux", LibCType.GLIBC)
    LINUX_MUSL = ("linux_musl", LibCType.MUSL)
    MACOS = ("macos", LibCType.LIBC)
    WINDOWS = ("windows", LibCType.C_STD_LIB)
    SOLARIS = ("solaris", LibCType.LIBC)
    AIX = ("aix", LibCType.LIBC)
    QNX = ("qnx", LibCType.LIBC)
    NONE = ("", LibCType.NONE)
    NOT_FOUND = ("not_found", LibCType.NOT_FOUND)

    def __init__(self, api_string: str, libc_type: LibCType) -> None:
        self.api_string = api_string
        self.libc_type = libc_type

    @classmethod
    def from_text(cls, text: str | None) -> OperatingSystem:
        if not text:
            return cls.NOT_FOUND
        key = _key(text)
        key = _OPERATING_SYSTEM_ALIASES.get(key, key)
        for member in cls:
            if member.api_string and member.api_string == key:
                return member
        return cls.NOT_FOUND


_OPERATING_SYSTEM_ALIASES = {
    "alpine": "alpine_linux",
    "alpine_linux_musl": "alpine_linux",
    "musl": "linux_musl",
    "mac": "macos",
    "macosx": "macos",
    "osx": "macos",
    "darwin": "macos",
    "win": "windows",
    "sunos": "solaris",
}


class PackageType(Enum):
    JDK = "jdk"
    JRE = "jre"
    NONE = ""
    NOT_FOUND = "not_found"

    @property
    def api_string(self) -> str:
        return self.value

    @classmethod
    def from_text(cls, text: str | None) -> PackageType:
        if not text:
            return cls.NOT_FOUND
        key = _key(text)
        for member in cls:
            if member.value and member.value == key:
                return member
        return cls.NOT_FOUND


class ArchiveType(Enum):
    """Archive and installer formats with the file endings that identify them.

    Declaration order is the matching order of from_filename(), so
    ".src.tar.gz" must come before ".tar.gz".
    """

    APK = ("apk", (".apk",))
    CAB = ("cab", (".cab",))
    DEB = ("deb", (".deb",))
    DMG = ("dmg", (".dmg",))
    EXE = ("exe", (".exe",))
    MSI = ("msi", (".msi",))
    PKG = ("pkg", (".pkg",))
    RPM = ("rpm", (".rpm",))
    SRC_TAR = ("src_tar", (".src.tar.gz",))
    TAR_GZ = ("tar.gz", (".tar.gz", ".tgz"))
    TAR_Z = ("tar.Z", (".tar.Z",))
    TAR = ("tar", (".tar",))
    ZIP = ("zip", (".zip",))
    SEVEN_ZIP = ("7z", (".7z",))
    NONE = ("", ())
    NOT_FOUND = ("not_found", ("not_found",))

    def __init__(self, api_string: str, file_endings: tuple[str, ...]) -> None:
        self.api_string = api_string
        self.file_endings = file_endings

    @classmethod
    def from_text(cls, text: str | None) -> ArchiveType:
        if not text:
            return cls.NOT_FOUND
        key = text.strip().lower().lstrip(".")
        for member in cls:
            if member.api_string and member.api_string.lower() == key:
                return member
        return cls.NOT_FOUND

    @classmethod
    def from_filename(cls, filename: str | None) -> ArchiveType:
        """Returns the first type whose ending the filename has, else NONE."""
        if not filename:
            return cls.NONE
        for member in cls:
            if member in (cls.NONE, cls.NOT_FOUND):
                continue
            if filename.endswith(member.file_endings):
                return member
        return cls.NONE


class TermOfSupport(Enum):
    """Support tier of a feature release."""

    NONE = ""
    LTS = "lts"
    MTS = "mts"
    STS = "sts"
    NOT_FOUND = "not_found"

    @property
    def api_string(self) -> str:
        return self.value

    @classmethod
    def from_text(cls, text: str | None) -> TermOfSupport:
        if not text:
            return cls.NOT_FOUND
        key = _key(text)
        key = _TERM_OF_SUPPORT_ALIASES.get(key, key)
        for member in cls:
            if member.value and member.value == key:
                return member
        return cls.NOT_FOUND


_TERM_OF_SUPPORT_ALIASES = {
    "long_term_support": "lts",
    "medium_term_support": "mts",
    "mid_term_support": "mts",
    "short_term_support": "sts",
}


class DownloadScope(Enum):
    """Query scope selecting packages by how they can be downloaded."""

    DIRECTLY = ("Directly downloadable", "directly_downloadable")
    NOT_DIRECTLY = ("Not directly downloadable", "not_directly_downloadable")

    def __init__(self, display_name: str, token: str) -> None:
        self.display_name = display_name
        self.token = token

    @classmethod
    def from_token(cls, token: str | None) -> DownloadScope | None:
        for member in cls:
            if member.token == token:
                return member
        return None

    def includes(self, directly_downloadable: bool) -> bool:
        return bool(directly_downloadable) == (self is DownloadScope.DIRECTLY)
