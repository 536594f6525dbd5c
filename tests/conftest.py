import os

import pytest

# GUI tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from bmfont_lua.i18n import set_language


SCENARIO_A = (
    '<info size="32" face="x" charset="" padding="0,0,0,0" spacing="1,1"/>'
    '<chars count="1">'
    '<char id="65" x="0" y="0" width="10" height="12" xoffset="0" yoffset="0" xadvance="11"/>'
    '</chars>'
)

ARIAL_XML = """<?xml version="1.0"?>
<font>
  <info face="Arial" size="-24" bold="0" italic="0" charset="" unicode="1"
        stretchH="100" smooth="1" aa="1" padding="0,0,0,0" spacing="1,1" outline="0"/>
  <common lineHeight="27" base="22" scaleW="256" scaleH="256" pages="1" packed="0"/>
  <pages>
    <page id="0" file="arial_0.png" />
  </pages>
  <chars count="3">
    <char id="32" x="0" y="0" width="3" height="1" xoffset="-1" yoffset="26"
          xadvance="6" page="0" chnl="15" />
    <char id="33" x="250" y="52" width="4" height="17" xoffset="1" yoffset="5" xadvance="7" page="0" chnl="15" />
    <char id="34" x="59" y="91" width="8" height="7" xoffset="0" yoffset="5" xadvance="9" page="0" chnl="15" />
  </chars>
</font>
"""


@pytest.fixture(autouse=True)
def english():
    set_language("en")
    yield
    set_language("en")


@pytest.fixture
def scenario_a():
    return SCENARIO_A


@pytest.fixture
def arial_xml():
    return ARIAL_XML
