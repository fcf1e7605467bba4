"""
Tests for the step-based job client in signalist.jobs.client.
"""

from unittest import mock

import pytest
from apscheduler.triggers.cron import CronTrigger

from signalist.jobs import client as job_client
from signalist.jobs.client import JobClient, StepContext, StepError


@pytest.fixture
def jobs():
    return JobClient("test-app", max_workers=2)


class TestStepContext:
    def test_run_returns_result(self):
        ctx = StepContext("fn", {"name": "e", "data": {}}, retries=0, retry_delay=0)
        assert ctx.run("add", lambda a, b: a + b, 2, b=3) == 5

    def test_run_retries_then_succeeds(self):
        fn = mock.Mock(side_effect=[RuntimeError("flaky"), "ok"])
        ctx = StepContext("fn", {}, retries=2, retry_delay=0)

        assert ctx.run("flaky-step", fn) == "ok"
        assert fn.call_count == 2

    def test_run_raises_step_error_after_retries(self):
        fn = mock.Mock(side_effect=RuntimeError("boom"))
        ctx = StepContext("fn", {}, retries=1, retry_delay=0)

        with pytest.raises(StepError) as excinfo:
            ctx.run("broken-step", fn)
        assert excinfo.value.step_id == "broken-step"
        assert isinstance(excinfo.value.error, RuntimeError)
        assert fn.call_count == 2

    def test_infer_calls_generate_text(self, monkeypatch):
        generate = mock.Mock(return_value="summary")
        monkeypatch.setattr(job_client, "generate_text", generate)
        ctx = StepContext("fn", {}, retries=0, retry_delay=0)

        assert ctx.infer("summarize", "the prompt", model="gemini-x") == "summary"
        generate.assert_called_once_with("the prompt", model="gemini-x")


class TestJobClient:
    def test_send_wait_runs_subscribed_functions(self, jobs):
        @jobs.create_function("greet", events=["app/hello"])
        def greet(ctx):
            return {"success": True, "message": f"hi {ctx.event['data']['name']}"}

        @jobs.create_function("other", events=["app/other"])
        def other(ctx):
            raise AssertionError("must not run")

        results = jobs.send("app/hello", {"name": "Ada"}, wait=True)

        assert results == [{"success": True, "message": "hi Ada"}]

    def test_send_in_background_returns_futures(self, jobs):
        @jobs.create_function("echo", events=["app/echo"])
        def echo(ctx):
            return {"success": True, "message": ctx.event["name"]}

        futures = jobs.send("app/echo")

        assert [f.result(timeout=5) for f in futures] == [{"success": True, "message": "app/echo"}]

    def test_unsubscribed_event(self, jobs):
        assert jobs.send("app/nobody", wait=True) == []

    def test_failing_function_reports_failure(self, jobs):
        @jobs.create_function("fails", events=["app/fail"], retries=0)
        def fails(ctx):
            ctx.run("explode", mock.Mock(side_effect=ValueError("bad data")))

        [result] = jobs.send("app/fail", wait=True)

        assert result["success"] is False
        assert "explode" in result["message"]

    def test_duplicate_function_id(self, jobs):
        jobs.create_function("dup")(lambda ctx: None)
        with pytest.raises(ValueError):
            jobs.create_function("dup")(lambda ctx: None)

    def test_schedule_registers_cron_functions_only(self, jobs):
        jobs.create_function("daily", events=["app/daily"], cron="0 12 * * *")(lambda ctx: {"success": True})
        jobs.create_function("event-only", events=["app/x"])(lambda ctx: {"success": True})
        scheduler = mock.Mock()

        jobs.schedule(scheduler)

        scheduler.add_job.assert_called_once()
        call = scheduler.add_job.call_args
        assert isinstance(call.args[1], CronTrigger)
        assert call.kwargs["args"] == ["daily"]
        assert call.kwargs["id"] == "daily"

    def test_scheduled_run_uses_cron_event(self, jobs):
        seen = []
        jobs.create_function("daily", cron="0 12 * * *")(lambda ctx: seen.append(ctx.event["name"]) or {"success": True})

        assert jobs._run_scheduled("daily") == {"success": True}
        assert seen == ["cron"]
