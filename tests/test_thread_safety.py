"""Thread safety tests for conversion.

Conversions share no mutable state: each render threads its own Margin and
configuration is immutable. These tests use real threads to catch
interference between concurrent conversions.
"""

from concurrent.futures import ThreadPoolExecutor

from culebra import ConvertConfig, Converter, convert

_SOURCES = [
    "for (let i = 0; i < 10; i++) { if (i) { f(i) } else { g(i) } }",
    "class A extends B {}\nlet x = 1, y = 2",
    "for (let j = 5; j > 0; j--) { for (let k = 0; k < j; k++) { h(j, k) } }",
    "if (a) { if (b) { if (c) { d() } } }",
]


class TestThreadSafety:
    """Concurrent conversions produce independent output."""

    def test_concurrent_convert_matches_sequential(self) -> None:
        expected = {source: convert(source) for source in _SOURCES}
        jobs = _SOURCES * 25

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(convert, jobs))

        assert results == [expected[source] for source in jobs]

    def test_shared_converter_across_threads(self) -> None:
        to_python = Converter()
        expected = [to_python(source) for source in _SOURCES]

        with ThreadPoolExecutor(max_workers=8) as pool:
            batches = list(pool.map(lambda _: to_python.convert_many(_SOURCES), range(40)))

        assert all(batch == expected for batch in batches)

    def test_different_configs_do_not_leak(self) -> None:
        two = Converter(ConvertConfig(indent_unit="  "))
        four = Converter(ConvertConfig(indent_unit="    "))
        source = "if (a) { b() }"

        def run(i: int) -> str:
            return (two if i % 2 else four)(source)

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(run, range(200)))

        for i, text in enumerate(results):
            assert text == ("if a:\n  b()" if i % 2 else "if a:\n    b()")
