"""
Backend entry point for Signalist background jobs.
Runs a job event once (e.g. from a CI cron) or keeps a scheduler alive
that triggers the daily news summary on its cron.
"""
import argparse
import os
from datetime import datetime, timezone
from apscheduler.schedulers.blocking import BlockingScheduler
from signalist.config import NEWS_SUMMARY_CRON
from signalist.jobs.functions import SEND_DAILY_NEWS_EVENT, jobs
from signalist.logging import log_event

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Run Signalist background jobs.")
    parser.add_argument("--event", default=SEND_DAILY_NEWS_EVENT, help="event to send once (default: %(default)s)")
    parser.add_argument("--schedule", action="store_true", help="run cron functions on a blocking scheduler")
    return parser.parse_args(argv)

def main(argv=None):
    """
    Main function orchestrates the job run:
    - Logs a startup marker
    - Either starts the scheduler, or sends a single event and waits for its functions
    """
    args = parse_args(argv)
    now_utc = datetime.now(timezone.utc)
    log_event("INFO", "Startup marker", github_sha=os.getenv("GITHUB_SHA"), utc_now=str(now_utc), news_summary_cron=NEWS_SUMMARY_CRON)

    if args.schedule:
        scheduler = BlockingScheduler(timezone="UTC")
        jobs.schedule(scheduler)
        scheduler.start()
        return []

    results = jobs.send(args.event, wait=True)
    for result in results:
        log_event("INFO", "Job result", event=args.event, result=result)
    return results

if __name__ == "__main__":
    main()
