# Copyright 2024 THU-BPM MarkLLM.
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

# =============================================================
# run_harness.py
# Description: Command line entry point of the fuzzing harness
# =============================================================

import json
import logging
import argparse
from harness.harness import FuzzHarness


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate reproducible fuzzing values.")
    parser.add_argument('--generator', type=str, default=None, help="dotted generator name, e.g. number.any")
    parser.add_argument('--count', type=int, default=None)
    parser.add_argument('--seed', type=lambda s: int(s, 0), default=None)
    parser.add_argument('--config', type=str, default=None, help="path to the harness config file")
    parser.add_argument('--output', type=str, default=None, help="JSON lines file for the batch")
    parser.add_argument('--state-in', type=str, default=None, help="engine snapshot restored before generating")
    parser.add_argument('--state-out', type=str, default=None, help="engine snapshot written after generating")
    parser.add_argument('--progress', action='store_true')
    parser.add_argument('--verbose', action='store_true')
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s %(name)s %(levelname)s %(message)s')

    harness = FuzzHarness(algorithm_config=args.config, seed=args.seed)
    if args.state_in:
        harness.load_state(args.state_in)

    values = harness.run(args.generator, args.count, output_path=args.output, show_progress=args.progress)
    if args.output is None:
        for value in values:
            print(json.dumps(value))

    if args.state_out:
        harness.save_state(args.state_out)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
