import sys
from collections import Counter
from dataclasses import dataclass

import requests
from colorama import Fore, Style

DEFAULT_HEADER_KEY = "Counter-ID"
ERROR_KEY = "Error"


@dataclass(frozen=True)
class SampleConfig:
    url: str
    rounds: int
    header_key: str = DEFAULT_HEADER_KEY
    error_key: str = ERROR_KEY
    timeout: float = 10.0

    def __post_init__(self):
        if self.rounds < 0:
            raise ValueError(f"rounds must be >= 0, got {self.rounds}")


def run_sampling(config: SampleConfig, session=None) -> Counter:
    """
    Call config.url exactly config.rounds times, one request after the other,
    and count the responses per instance id found in config.header_key.

    Transport failures are counted under config.error_key and never stop the run.
    Responses without the header are not counted.
    """
    tally = Counter()
    owns_session = session is None
    if owns_session:
        session = requests.Session()

    try:
        for i in range(config.rounds):
            print(f"[Sampler] Performing Round {i}")
            try:
                resp = session.get(config.url, timeout=config.timeout)
            except requests.RequestException as e:
                print(f"{Fore.RED}[Sampler] Error during request {i}: {e}{Style.RESET_ALL}", file=sys.stderr)
                tally[config.error_key] += 1
                continue

            with resp:
                service_key = resp.headers.get(config.header_key, "")
            if service_key:
                tally[service_key] += 1
    finally:
        if owns_session:
            session.close()

    return tally
