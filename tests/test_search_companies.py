from __future__ import annotations

from pipelines.search_companies import search_companies


SEARCH_PAGE = """
<html><body><main>
  <div class="SearchResultCard-card">
    <h2><a href="/foretag/fortnox-aktiebolag/växjö/programvaror/2K1Q3Z8I5YCDE">Fortnox Aktiebolag</a></h2>
    <div><span>Org.nr</span> <span>556469-6291</span></div>
    <div>Växjö</div>
    <div><span>Omsättning</span><span>2023 1 853 000 tkr</span></div>
  </div>
  <div class="SearchResultCard-card">
    <h2><a href="/foretag/fortnox-filial/x/y/Z">Fortnox Filial</a></h2>
    <div>Utan organisationsnummer</div>
  </div>
</main></body></html>
"""


def test_search_keeps_registered_hits(make_fetcher, events, settings):
    fetcher = make_fetcher(SEARCH_PAGE)
    results = search_companies("fortnox", fetcher=fetcher, events=events, settings=settings)

    assert fetcher.urls == ["https://www.allabolag.se/bransch-s%C3%B6k?q=fortnox"]
    assert len(results) == 1
    hit = results[0]
    assert hit.name == "Fortnox Aktiebolag"
    assert hit.org_number == "556469-6291"
    assert hit.location == "Växjö"
    assert hit.revenue == 1853000
    assert hit.link.startswith("https://www.allabolag.se/foretag/fortnox-aktiebolag/")


def test_search_without_hits(make_fetcher, empty_page, settings):
    assert search_companies("zzz", fetcher=make_fetcher(empty_page), settings=settings) == []
