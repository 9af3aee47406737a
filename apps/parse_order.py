#!/usr/bin/env python3
"""Print the order an account holds as a result of one transaction.

The transaction comes either from a JSON file (rippled `tx` result shape,
`-` for stdin) or from a rippled JSON-RPC endpoint:

  python apps/parse_order.py --account rKXC... tx.json
  python apps/parse_order.py --account rKXC... --rpc http://127.0.0.1:5005 --tx-hash 78B0...
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

import requests

from xrpl_orders import OrderNotFound, load_config, reconstruct_order

log = logging.getLogger("xrpl_orders.apps.parse_order")


def rpc_call(rpc_url: str, method: str, params: List[Dict[str, Any]], timeout: int = 60) -> Dict[str, Any]:
    """Ask rippled for ``method`` and hand back its ``result`` body.

    Used for ``tx`` lookups. An error status such as ``txnNotFound`` raises
    RuntimeError naming the rippled error code.
    """
    r = requests.post(rpc_url, json={"method": method, "params": params}, timeout=timeout)
    r.raise_for_status()
    body = r.json()

    result = body.get("result")
    if not isinstance(result, dict):
        raise RuntimeError(f"rippled {method}: response has no result object")
    # status is absent on some rippled builds
    status = result.get("status")
    if status not in (None, "success"):
        raise RuntimeError(f"rippled {method} failed: {result.get('error', status)}")

    return result


def load_tx(path: str) -> Dict[str, Any]:
    if path == "-":
        data = json.load(sys.stdin)
    else:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    # accept a full JSON-RPC envelope as well as the bare result
    if isinstance(data, dict) and isinstance(data.get("result"), dict):
        data = data["result"]
    return data


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Reconstruct an order from a settled transaction.")
    ap.add_argument("tx_json", nargs="?", help="transaction JSON file, or '-' for stdin")
    ap.add_argument("--account", required=True, help="account whose order to reconstruct")
    ap.add_argument("--sequence", type=int, default=None, help="offer sequence (optional)")
    ap.add_argument("--config", default=None, help="currency conventions JSON file")
    ap.add_argument("--rpc", default=None, help="rippled JSON-RPC URL, e.g. http://127.0.0.1:5005")
    ap.add_argument("--tx-hash", default=None, help="transaction hash to fetch with --rpc")
    ap.add_argument("--timeout", type=int, default=60)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    if args.rpc:
        if not args.tx_hash:
            ap.error("--rpc requires --tx-hash")
    elif not args.tx_json:
        ap.error("give a transaction JSON file or --rpc with --tx-hash")
    return args


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    cfg = load_config(args.config)
    if args.rpc:
        log.info("Fetching tx %s from %s", args.tx_hash, args.rpc)
        tx = rpc_call(args.rpc, "tx", [{"transaction": args.tx_hash, "binary": False}], timeout=args.timeout)
    else:
        tx = load_tx(args.tx_json)

    try:
        order = reconstruct_order(
            tx,
            account=args.account,
            sequence=args.sequence,
            priority=cfg.currency_prioritization,
            pair_exceptions=cfg.currency_pair_exceptions,
        )
    except OrderNotFound as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(order.to_json(), indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
