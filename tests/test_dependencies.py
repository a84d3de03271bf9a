"""
Process-wide orchestrator factory tests.
"""

import threading

import api.dependencies as dependencies
from chains.hts_chain import ClassificationOrchestrator


def test_get_orchestrator_is_cached(monkeypatch):
    monkeypatch.setattr(dependencies, "hts_orchestrator", None)
    first = dependencies.get_orchestrator()
    assert isinstance(first, ClassificationOrchestrator)
    assert dependencies.get_orchestrator() is first


def test_get_orchestrator_uses_settings(monkeypatch):
    monkeypatch.setattr(dependencies, "hts_orchestrator", None)
    monkeypatch.setattr(dependencies.settings, "fetch_max_wait", 5.0)
    monkeypatch.setattr(dependencies.settings, "fetch_retry_interval", 12.0)
    loader = dependencies.get_orchestrator().loader
    assert loader.max_wait == 5.0
    assert loader.retry_interval == 12.0


def test_concurrent_first_calls_build_one_orchestrator(monkeypatch):
    monkeypatch.setattr(dependencies, "hts_orchestrator", None)
    built = []
    original_init = ClassificationOrchestrator.__init__

    def counting_init(self, *args, **kwargs):
        built.append(self)
        original_init(self, *args, **kwargs)

    monkeypatch.setattr(ClassificationOrchestrator, "__init__", counting_init)

    start = threading.Barrier(8)
    results = []

    def call():
        start.wait()
        results.append(dependencies.get_orchestrator())

    threads = [threading.Thread(target=call) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(built) == 1
    assert all(r is results[0] for r in results)
