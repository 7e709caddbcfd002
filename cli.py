import argparse
import asyncio
import json
import logging
import os
import sys
import uuid as _uuid

from config.settings import get_settings
from services.domain_utils import is_linkedin_profile_url, normalize_linkedin_profile_url
from services.profile_lookup import fetch_results, lookup_profile
from utils.logging_setup import init_logging


def cmd_lookup(args):
	if not os.getenv("RUN_ID"):
		os.environ["RUN_ID"] = _uuid.uuid4().hex
	query = args.profile.strip()
	if args.strict:
		if not normalize_linkedin_profile_url(query):
			print("Invalid LinkedIn profile URL")
			return 1
	elif not is_linkedin_profile_url(query):
		logging.warning(f"Query does not look like a LinkedIn profile URL: {query}")

	if args.outcome:
		outcome = asyncio.run(lookup_profile(query))
		print(json.dumps(outcome.model_dump(by_alias=True), indent=2, ensure_ascii=False))
		return 0 if outcome.ok else 1

	result = asyncio.run(fetch_results(query))
	if result is None:
		print("Lookup failed")
		return 1
	print(json.dumps(result.model_dump(by_alias=True), indent=2, ensure_ascii=False))
	return 0


def main():
	settings = get_settings()
	parser = argparse.ArgumentParser(description="LinkedIn profile lookup CLI")
	parser.add_argument("--log-level", default=None, help=f"Log level (default from settings: {settings.log_level})")
	sub = parser.add_subparsers(dest="cmd", required=True)

	p_lk = sub.add_parser("lookup", help="Look up name and note for a LinkedIn profile URL")
	p_lk.add_argument("--profile", "-p", required=True, help="LinkedIn profile URL (or any search query)")
	p_lk.add_argument("--strict", action="store_true", help="Reject queries that are not LinkedIn profile URLs")
	p_lk.add_argument("--outcome", action="store_true", help="Print found/empty/failed status alongside the record")
	p_lk.set_defaults(func=cmd_lookup)

	args = parser.parse_args()
	init_logging(args.log_level or settings.log_level)
	code = args.func(args)
	if code:
		sys.exit(code)


if __name__ == "__main__":
	main()
