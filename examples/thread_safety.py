"""Thread Safety Example - Sharing the currency index across threads.

Thread Safety:
    split(), validate() and parse_money() are pure functions over an
    immutable CurrencyIndex. The default index is built once, on first
    use, under a lock; afterwards reads take no lock at all.

Demonstrates:
1. Warm-up at startup (recommended for latency-sensitive services)
2. Concurrent validation with ThreadPoolExecutor
3. A private provider for a custom currency list

Python 3.13+.
"""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor, as_completed

from liquiditycheck import (
    CurrencyIndexProvider,
    get_default_index,
    parse_money,
    validate,
)
from liquiditycheck.currencies import get_currency


# Example 1: Warm-up at startup (RECOMMENDED)
def example_1_warm_up() -> None:
    """Example 1: Build the default index before serving requests."""
    print("=" * 60)
    print("Example 1: Recommended Pattern - Warm-up at Startup")
    print("=" * 60)

    index = get_default_index()
    print(f"[STARTUP] Index built: {len(index.tokens)} tokens, "
          f"{len(index.digit_separators)} digit separators")
    print("[SUCCESS] Later calls reuse the same index without locking")


# Example 2: ThreadPoolExecutor with the shared index
def example_2_threadpool_pattern() -> None:
    """Example 2: Validate a batch of strings concurrently."""
    print("\n" + "=" * 60)
    print("Example 2: ThreadPoolExecutor Pattern")
    print("=" * 60)

    inputs = ["$50", "50 USD", "€ 50", "50 ER", "50,000 PAB", "50_$"]

    with ThreadPoolExecutor(max_workers=4) as executor:
        futures = {executor.submit(parse_money, text): text for text in inputs}
        for future in as_completed(futures):
            _, errors = future.result()
            diagnostic = errors[0].diagnostic if errors else None
            status = diagnostic.code.name if diagnostic is not None else "ok"
            print(f"  {futures[future]!r}: {status}")

    print("\n[SUCCESS] All lookups completed safely")


# Example 3: Private provider
def example_3_private_provider() -> None:
    """Example 3: Lazily build a restricted index shared by several threads."""
    print("\n" + "=" * 60)
    print("Example 3: Private CurrencyIndexProvider")
    print("=" * 60)

    definitions = tuple(
        d for d in (get_currency("USD"), get_currency("EUR")) if d is not None
    )
    provider = CurrencyIndexProvider(definitions)
    results: list[bool] = []
    lock = threading.Lock()

    def worker(text: str) -> None:
        """Validate against the private index."""
        ok = validate(text, index=provider.get())
        with lock:
            results.append(ok)

    threads = [threading.Thread(target=worker, args=(t,)) for t in ("$5", "5 EUR", "5 PAB")]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    print(f"  loaded={provider.is_loaded} accepted={sum(results)} of {len(results)}")
    print("\n[SUCCESS] Provider built its index exactly once")


if __name__ == "__main__":
    example_1_warm_up()
    example_2_threadpool_pattern()
    example_3_private_provider()

    print("\n" + "=" * 60)
    print("[SUCCESS] All thread safety examples complete!")
    print("=" * 60)
