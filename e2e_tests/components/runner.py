# e2e_tests/components/runner.py
import base64
import json
import xml.etree.ElementTree as ET
from typing import Any, List, Optional, TypedDict

import boto3
from botocore.client import Config as BotocoreConfig
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .config import Config


# --- Data Structures ---


class InvocationCase(TypedDict):
    name: str
    payload: Any
    expect_error: Optional[str]  # errorMessage the runtime should report
    expect_result: Optional[str]


class CaseResult(TypedDict):
    name: str
    status: str  # 'PASS' or 'FAIL'
    details: str


GREETING_TEMPLATE = "Hello, {name}; We are delighted to have you in Version {version}"
STATIC_GREETING_TEMPLATE = "Hello; We are delighted to have you in Version {version}"


class E2ETestRunner:
    """Invokes a deployed greeter function and checks each response."""

    def __init__(self, config: Config):
        self.config = config

        # Greetings are instant; anything slow is a cold start or a hang.
        self.lambda_client_config = BotocoreConfig(
            read_timeout=30, connect_timeout=10, retries={"max_attempts": 2}
        )
        session = boto3.Session(region_name=config.aws_region)
        self.lambda_client = session.client("lambda", config=self.lambda_client_config)
        self.console = Console()

    def _build_cases(self) -> List[InvocationCase]:
        version = self.config.release_version
        payloads = [
            ("named", {"name": "Ada"}),
            ("unicode-name", {"name": "Łukasz Ö"}),
            ("empty-object", {}),
            ("null", None),
        ]

        if self.config.greeting_mode == "static":
            fixed = self.config.static_greeting or STATIC_GREETING_TEMPLATE.format(
                version=version
            )
            return [
                {"name": name, "payload": payload, "expect_error": None, "expect_result": fixed}
                for name, payload in payloads
            ]

        cases: List[InvocationCase] = []
        for name, payload in payloads:
            if payload is None:
                cases.append(
                    {
                        "name": name,
                        "payload": payload,
                        "expect_error": "received nil event",
                        "expect_result": None,
                    }
                )
            else:
                cases.append(
                    {
                        "name": name,
                        "payload": payload,
                        "expect_error": None,
                        "expect_result": GREETING_TEMPLATE.format(
                            name=payload.get("name", ""), version=version
                        ),
                    }
                )
        return cases

    def _invoke(self, payload: Any) -> tuple[dict, Any, str]:
        response = self.lambda_client.invoke(
            FunctionName=self.config.lambda_function_name,
            InvocationType="RequestResponse",
            LogType="Tail",
            Payload=json.dumps(payload),
        )
        body = json.loads(response["Payload"].read() or b"null")
        log_result = base64.b64decode(response.get("LogResult", "")).decode("utf-8")
        return response, body, log_result

    def _run_case(self, case: InvocationCase) -> CaseResult:
        response, body, log_result = self._invoke(case["payload"])

        if self.config.verbose:
            self.console.print(
                Panel(log_result or "(no logs)", title=f"Log tail: {case['name']}", border_style="yellow")
            )

        if case["expect_error"] is not None:
            if not response.get("FunctionError"):
                return {"name": case["name"], "status": "FAIL", "details": f"Expected an error, got {body!r}"}
            message = body.get("errorMessage") if isinstance(body, dict) else None
            if message != case["expect_error"]:
                return {"name": case["name"], "status": "FAIL", "details": f"Wrong error message: {message!r}"}
            return {"name": case["name"], "status": "PASS", "details": f"{body.get('errorType')}: {message}"}

        if response.get("FunctionError"):
            return {"name": case["name"], "status": "FAIL", "details": f"Function error: {body!r}"}
        if body != case["expect_result"]:
            return {"name": case["name"], "status": "FAIL", "details": f"Unexpected result: {body!r}"}
        return {"name": case["name"], "status": "PASS", "details": body}

    def _display_and_report(self, results: List[CaseResult]):
        """Displays results to console and generates JUnit XML report if requested."""
        table = Table(title="Invocation Results")
        table.add_column("Case", style="cyan", no_wrap=True)
        table.add_column("Status", justify="center")
        table.add_column("Details", style="yellow")

        for res in results:
            style = "green" if res["status"] == "PASS" else "red"
            table.add_row(res["name"], f"[{style}]{res['status']}[/{style}]", res["details"])

        self.console.print(table)

        if self.config.report_file:
            self._generate_junit_report(results)
            self.console.print(
                f"JUnit XML report saved to: [bold blue]{self.config.report_file}[/bold blue]"
            )

    def _generate_junit_report(self, results: List[CaseResult]):
        """Creates a JUnit XML file from the case results."""
        failures = sum(1 for r in results if r["status"] == "FAIL")
        test_suite = ET.Element(
            "testsuite",
            name="GreeterE2ETest",
            tests=str(len(results)),
            failures=str(failures),
        )
        for res in results:
            test_case = ET.SubElement(
                test_suite, "testcase", name=res["name"], classname="E2EInvocation"
            )
            if res["status"] == "FAIL":
                failure = ET.SubElement(test_case, "failure", message=res["details"])
                failure.text = f"Case: {res['name']}\nDetails: {res['details']}"

        tree = ET.ElementTree(test_suite)
        ET.indent(tree, space="  ")
        tree.write(self.config.report_file, encoding="utf-8", xml_declaration=True)

    def run(self) -> int:
        """Executes every invocation case and reports the outcome."""
        self.console.print(
            Panel(
                f"[cyan bold]{self.config.description}[/cyan bold]\n\n"
                f"Function: [bold blue]{self.config.lambda_function_name}[/bold blue]\n"
                f"Mode: {self.config.greeting_mode}",
                title="Test Case",
                expand=False,
            )
        )

        try:
            results = [self._run_case(case) for case in self._build_cases()]
        except Exception as e:
            self.console.print(
                "\n[bold red]An unexpected error occurred during the test run.[/bold red]"
            )
            if self.config.verbose:
                self.console.print_exception(show_locals=True)
            else:
                self.console.print(f"Error details: {e}")
                self.console.print(
                    "\n[dim]Run with the --verbose flag for a full traceback.[/dim]"
                )
            return 1

        self._display_and_report(results)
        return 0 if all(r["status"] == "PASS" for r in results) else 1
