"""Shared fixtures: sample playlists for every supported format."""

# pylint: disable=missing-function-docstring
from pathlib import Path
from sys import path

from pytest import fixture

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in path:
    path.insert(0, str(ROOT))

ASF = b"""[Reference]\r
Ref1=http://live.example.com/aaa?MSWMExt=.asf\r
Ref2=http://live2.example.com/bbb?MSWMExt=.asf\r
"""

M3U = b"""#EXTM3U
#EXTINF:-1,Station One
http://live1.example.com:2151/

#EXTINF:-1,Station Two
not a stream
mms://live2.example.com:2152/
http://live3.example.com:2153/"""

PLS = b"""[playlist]
NumberOfEntries=3
File1=http://live1.example.com:8881/
Title1=First station
Title2=Second station
File2=http://live2.example.com:8882/
File3=http://live3.example.com:8883/
Length1=-1
Version=2
"""

# Every entry declares its own metadata.
ASX_ENTRIES = b"""<ASX version="3.0" BANNERBAR="AUTO">
  <TITLE>MT</TITLE>
  <ENTRY>
    <TITLE>E1T</TITLE>
    <ABSTRACT>E1A</ABSTRACT>
    <LOGO href="http://E1.ex.com/l.gif" Style="BANNER"/>
    <AUTHOR>E1AU</AUTHOR>
    <COPYRIGHT>E1C</COPYRIGHT>
    <MOREINFO href="http://E1.mi.ex.com" />
    <REF href="http://E1.st1.ex.com:8881/"/>
    <REF href="http://E1.st2.ex.com:8882/"/>
  </ENTRY>
  <Entry>
    <Title>E2T</Title>
    <Abstract>E2A</Abstract>
    <Logo href='http://E2.ex.com/l.gif' Style='BANNER'/>
    <Author>E2AU</Author>
    <Copyright>E2C</Copyright>
    <MoreInfo href="http://E2.mi.ex.com"></MoreInfo>
    <Ref href="http://E2.st1.ex.com:8881/"></Ref>
    <Ref href="http://E2.st2.ex.com:8882/" />
  </Entry>
</ASX>
"""

# Entries inherit playlist-level metadata.
ASX_INHERIT = b"""

<ASX version="3.0" BANNERBAR="AUTO">
  <TITLE>MT</TITLE>
  <ABSTRACT>MA</ABSTRACT>
  <LOGO href="http://ml.ex.com/l.gif" Style="BANNER"/>
  <AUTHOR>MAU</AUTHOR>
  <COPYRIGHT>MC</COPYRIGHT>
  <MOREINFO href="http://mi.ex.com/mi" />
  <ENTRY>
    <REF href="http://E1.st1.ex.com:8881/"/>
    <REF href="http://E1.st2.ex.com:8882/"/>
  </ENTRY>
  <ENTRY>
    <ABSTRACT>E2A</ABSTRACT>
    <MOREINFO href="http://E2.mi.ex.com" />
    <REF href="http://E2.st1.ex.com:8882/"/>
  </ENTRY>
</ASX>
"""


@fixture
def asf_playlist() -> bytes:
    return ASF


@fixture
def m3u_playlist() -> bytes:
    return M3U


@fixture
def pls_playlist() -> bytes:
    return PLS


@fixture
def asx_entries_playlist() -> bytes:
    return ASX_ENTRIES


@fixture
def asx_inherit_playlist() -> bytes:
    return ASX_INHERIT
