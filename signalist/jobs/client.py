"""
Minimal event and cron driven job runner.

Functions subscribe to event names and/or a cron expression. Each run gets a
StepContext whose steps are logged and retried individually, so a failing
email send does not repeat the AI calls that came before it.
"""
import time
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone

from apscheduler.triggers.cron import CronTrigger

from signalist.ai import generate_text
from signalist.config import JOB_STEP_RETRIES
from signalist.logging import log_event

STEP_RETRY_DELAY_SECONDS = 1.0
CRON_EVENT = "cron"


class StepError(Exception):
    def __init__(self, step_id, error):
        super().__init__(f"Step '{step_id}' failed: {error}")
        self.step_id = step_id
        self.error = error


class StepContext:
    def __init__(self, function_id, event, retries=JOB_STEP_RETRIES, retry_delay=STEP_RETRY_DELAY_SECONDS):
        self.function_id = function_id
        self.event = event
        self.retries = retries
        self.retry_delay = retry_delay

    def run(self, step_id, fn, *args, **kwargs):
        """
        Runs fn as a named step, retrying up to `retries` extra times.
        Raises StepError once all attempts failed.
        """
        attempts = self.retries + 1
        for attempt in range(1, attempts + 1):
            log_event("INFO", "Step started", function=self.function_id, step=step_id, attempt=attempt)
            try:
                result = fn(*args, **kwargs)
            except Exception as e:
                log_event("ERROR", "Step failed", function=self.function_id, step=step_id, attempt=attempt, error=str(e))
                if attempt == attempts:
                    raise StepError(step_id, e) from e
                time.sleep(self.retry_delay)
                continue
            log_event("INFO", "Step completed", function=self.function_id, step=step_id)
            return result

    def infer(self, step_id, prompt, model):
        return self.run(step_id, generate_text, prompt, model=model)


class JobFunction:
    def __init__(self, function_id, handler, events=(), cron=None, retries=JOB_STEP_RETRIES):
        self.id = function_id
        self.handler = handler
        self.events = tuple(events)
        self.cron = cron
        self.retries = retries


class JobClient:
    def __init__(self, app_id, max_workers=4):
        self.app_id = app_id
        self.functions = {}
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix=app_id)

    def create_function(self, function_id, events=(), cron=None, retries=JOB_STEP_RETRIES):
        def decorator(handler):
            if function_id in self.functions:
                raise ValueError(f"Duplicate job function id: {function_id}")
            self.functions[function_id] = JobFunction(function_id, handler, events, cron, retries)
            return handler
        return decorator

    def functions_for(self, event_name):
        return [f for f in self.functions.values() if event_name in f.events]

    def invoke(self, function_id, event):
        """
        Runs one function for an event. Failures are logged and reported in the
        returned result rather than raised.
        """
        function = self.functions[function_id]
        ctx = StepContext(function.id, event, retries=function.retries)
        log_event("INFO", "Function started", function=function.id, event=event.get("name"))
        try:
            result = function.handler(ctx)
        except Exception as e:
            log_event("ERROR", "Function failed", function=function.id, event=event.get("name"), error=str(e))
            return {"success": False, "message": str(e)}
        log_event("INFO", "Function finished", function=function.id, result=result)
        return result

    def send(self, event_name, data=None, wait=False):
        """
        Delivers an event to every subscribed function. With wait=True the
        functions run in the caller's thread and their results are returned;
        otherwise they run in the background and futures are returned.
        """
        event = {"name": event_name, "data": data or {}, "ts": datetime.now(timezone.utc).isoformat()}
        targets = self.functions_for(event_name)
        if not targets:
            log_event("WARN", "No function subscribed to event", event=event_name)
        if wait:
            return [self.invoke(f.id, event) for f in targets]
        return [self._executor.submit(self.invoke, f.id, event) for f in targets]

    def _run_scheduled(self, function_id):
        event = {"name": CRON_EVENT, "data": {}, "ts": datetime.now(timezone.utc).isoformat()}
        return self.invoke(function_id, event)

    def schedule(self, scheduler):
        """
        Registers every cron function on an APScheduler scheduler (UTC).
        """
        for function in self.functions.values():
            if not function.cron:
                continue
            scheduler.add_job(
                self._run_scheduled,
                CronTrigger.from_crontab(function.cron, timezone="UTC"),
                args=[function.id],
                id=function.id,
                replace_existing=True,
            )
            log_event("INFO", "Function scheduled", function=function.id, cron=function.cron)


jobs = JobClient("signalist")
