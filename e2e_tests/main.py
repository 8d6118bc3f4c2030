#!/usr/bin/env python

# e2e_tests/main.py

import argparse
import sys

import boto3
from botocore.exceptions import ClientError, NoCredentialsError, NoRegionError
from rich.console import Console
from rich.panel import Panel

from components.config import Config, load_configuration
from components.runner import E2ETestRunner


def verify_aws_connectivity(config: Config):
    """
    Performs pre-flight checks before the test runner is instantiated.
    - Verifies credentials and region are configured.
    - Verifies the target Lambda function exists and is reachable.
    - Exits with code 2 and a clear message on failure.
    """
    console = Console()
    console.print("\n--- [bold blue]Pre-flight Checks[/bold blue] ---")

    try:
        session = boto3.Session(region_name=config.aws_region)
        lambda_client = session.client("lambda")
        console.log("[green]✓[/green] Boto3 Lambda session initialized successfully.")

        function_config = lambda_client.get_function_configuration(
            FunctionName=config.lambda_function_name
        )
        console.log(
            f"[green]✓[/green] Access confirmed for Lambda function: '{config.lambda_function_name}'"
        )

        deployed_mode = (
            function_config.get("Environment", {}).get("Variables", {}).get("GREETING_MODE")
        )
        if deployed_mode and deployed_mode.lower() != config.greeting_mode:
            console.log(
                f"[yellow]![/yellow] Deployed GREETING_MODE is '{deployed_mode}', "
                f"but the test expects '{config.greeting_mode}'."
            )

        console.print("[bold green]✅ Pre-flight checks passed.[/bold green]")

    except NoCredentialsError:
        console.print("\n[bold red]❌ PRE-FLIGHT CHECK FAILED[/bold red]\n")
        console.print(
            Panel(
                "AWS credentials not found. Configure a profile or export AWS_ACCESS_KEY_ID / AWS_SECRET_ACCESS_KEY.",
                title="Authentication Error",
                border_style="red",
            )
        )
        sys.exit(2)

    except NoRegionError:
        console.print("\n[bold red]❌ PRE-FLIGHT CHECK FAILED[/bold red]\n")
        console.print(
            Panel(
                "No AWS region set. Pass --aws-region or set 'aws_region' in the config file.",
                title="Configuration Error",
                border_style="red",
            )
        )
        sys.exit(2)

    except ClientError as e:
        console.print("\n[bold red]❌ PRE-FLIGHT CHECK FAILED[/bold red]\n")
        error_code = e.response["Error"]["Code"]
        if error_code == "ResourceNotFoundException":
            error_message = f"Lambda function not found: '{config.lambda_function_name}'. Please check the function name."
        elif error_code in ("AccessDeniedException", "403"):
            error_message = "Access Denied when trying to access the function. Please check your IAM permissions."
        else:
            error_message = f"An unexpected AWS API error occurred: {e}"

        console.print(Panel(error_message, title="AWS API Error", border_style="red"))
        sys.exit(2)


def main():
    """Main entry point for the test runner script."""
    parser = argparse.ArgumentParser(
        description="End-to-end check for a deployed greeter Lambda function.",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("-c", "--config", help="Path to a JSON configuration file.")
    parser.add_argument("-f", "--function-name", dest="lambda_function_name", help="Deployed function name or ARN.")
    parser.add_argument("--mode", dest="greeting_mode", choices=["validating", "static"], help="GREETING_MODE the function runs with.")
    parser.add_argument("--release-version", dest="release_version", help="RELEASE_VERSION the function runs with.")
    parser.add_argument("--aws-region", dest="aws_region", help="AWS region of the function.")
    parser.add_argument("--report-file", dest="report_file", help="Write a JUnit XML report here.")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=None,
        help="Show log tails and full exception tracebacks.",
    )

    args = parser.parse_args()

    try:
        config = load_configuration(args)
    except (FileNotFoundError, ValueError) as e:
        Console().print(Panel(str(e), title="Configuration Error", border_style="red"))
        sys.exit(2)

    verify_aws_connectivity(config)

    runner = E2ETestRunner(config)
    sys.exit(runner.run())


if __name__ == "__main__":
    main()
