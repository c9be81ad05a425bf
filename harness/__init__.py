from .harness import FuzzHarness, HarnessConfig
