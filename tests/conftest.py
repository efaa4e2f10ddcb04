from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Tuple

import pytest


def pytest_configure():
    # Ensure project root is on sys.path for absolute imports like 'pipelines.runner'
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))
    # Set test environment knobs
    os.environ.setdefault("RUN_ENV", "test")


class StubFetcher:
    """Returns canned HTML and records every URL it was asked for."""

    def __init__(self, html: str) -> None:
        self.html = html
        self.urls: List[str] = []

    def fetch_page(self, url: str) -> str:
        self.urls.append(url)
        return self.html


class RecordingEventSink:
    def __init__(self) -> None:
        self.events: List[Tuple[str, Dict[str, Any]]] = []

    def emit(self, event: str, **fields: Any) -> None:
        self.events.append((event, fields))

    def named(self, event: str) -> List[Dict[str, Any]]:
        return [fields for name, fields in self.events if name == event]


CARD_PAGE = """
<html><head><title>Segmentering - allabolag.se</title></head>
<body><main>
  <h1>13 170 företag</h1>
  <div class="SearchResultCard-card">
    <h2><a href="/foretag/fortnox-ab/växjö/programvaror/2K1Q3Z8I5YCDE">Fortnox AB</a></h2>
    <div><span>Org.nr</span> <span>556469-6291</span></div>
    <div>Växjö</div>
    <div><span>Anställda</span><span>45</span></div>
    <div><span>Omsättning</span><span>2023 1 234 567 tkr</span></div>
    <div><span>Årets resultat</span><span>2023 -12 345 tkr</span></div>
    <div><span>Registreringsdatum</span><span>1989-04-17</span></div>
    <a href="/bransch/programvaror/10241">Programvaror</a>
    <a href="/bransch/datakonsulter/10242">Datakonsulter</a>
    <a href="/bransch/programvaror/10241">Programvaror</a>
  </div>
  <div class="SearchResultCard-card">
    <h2><a href="/foretag/smabolaget-ab/umeå/bygg/9ZZZ">Småbolaget AB</a></h2>
    <div><span>Org.nr</span> <span>559000-1234</span></div>
    <div>Storgatan 1, 901 10 Umeå</div>
    <div><span>Anställda</span><span>1-4</span></div>
  </div>
</main></body></html>
"""

HEADING_PAGE = """
<html><body><main>
  <h1>2 företag</h1>
  <ul>
    <li><article>
      <h3><a href="/foretag/acme-ab/umeå/bygg/ABC">Acme AB</a></h3>
      <p>Org.nr 556000-0001</p>
      <p>Storgatan 1, 901 10 Umeå</p>
      <p>Anställda 12</p>
      <p>Omsättning 2022 5 400 tkr</p>
    </article></li>
    <li><article>
      <h3><a href="/foretag/beta-hb/umeå/konsult/DEF">Beta HB</a></h3>
      <p>Org.nr 969000-0002</p>
      <p>Anställda 250</p>
    </article></li>
  </ul>
  <section><h2><a href="/foretag/lista">Köp denna lista</a></h2></section>
</main></body></html>
"""

EMPTY_PAGE = """
<html><body><main>
  <h1>0 företag</h1>
  <p>Inga företag matchar din sökning.</p>
</main></body></html>
"""

DETAIL_PAGE = """
<html><head><title>Fortnox Aktiebolag - 556469-6291 - Se Nyckeltal, Befattningar, Adress mm</title></head>
<body>
  <div><i class="fa-solid fa-location-dot"></i> Växjö</div>
  <div><i class="fa-solid fa-phone-flip"></i> Telefon: 0470-78 50 00</div>
  <p class="company-description">Fortnox utvecklar affärssystem för små och medelstora företag.</p>
  <div><span>Org.nr</span> <span>556469-6291</span></div>
  <div><span>Anställda</span><span>1 024</span></div>
  <div><span>Omsättning</span><span>2023 1 853 000 tkr</span></div>
  <div class="IndustryTags-tags">
    <span class="Tag-root"><a href="/bransch-sök/programvaror">Programvaror</a></span>
    <span class="Tag-root"><a href="/bransch-sök/datakonsulter">Datakonsulter</a></span>
  </div>
</body></html>
"""

INDUSTRY_PAGE = """
<ul class="MuiTreeView-root">
  <li class="MuiTreeItem-root" id=":r5:-10001">
    <div class="MuiTreeItem-content"><div class="MuiTreeItem-label">Bygg-, design- &amp; inredningsverksamhet</div></div>
    <ul>
      <li class="MuiTreeItem-root" id=":r5:-10002">
        <div class="MuiTreeItem-content"><div class="MuiTreeItem-label">Byggverksamhet</div></div>
      </li>
    </ul>
  </li>
  <li class="MuiTreeItem-root" id="unrelated"><div class="MuiTreeItem-label">Ignored</div></li>
</ul>
"""


@pytest.fixture
def settings():
    from config.settings import Settings

    return Settings()


@pytest.fixture
def events():
    return RecordingEventSink()


@pytest.fixture
def make_fetcher():
    def _make(html: str) -> StubFetcher:
        return StubFetcher(html)

    return _make


@pytest.fixture
def card_page():
    return CARD_PAGE


@pytest.fixture
def heading_page():
    return HEADING_PAGE


@pytest.fixture
def empty_page():
    return EMPTY_PAGE


@pytest.fixture
def detail_page():
    return DETAIL_PAGE


@pytest.fixture
def industry_page():
    return INDUSTRY_PAGE
