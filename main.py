#!/usr/bin/env python3
"""
TeamCity Build Status

Lists the latest build of every build type on a TeamCity server, grouped by project.
"""

import sys
import argparse
import time
from teamcity_rest_client.utils.config import Config
from teamcity_rest_client.utils.debug_logger import DebugLogger
from teamcity_rest_client.utils.errors import TeamcityError
from teamcity_rest_client.utils.progress import ProgressTracker
from teamcity_rest_client.utils.report_writer import ReportWriter
from teamcity_rest_client.operations.status_report import StatusReport

def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='TeamCity Build Status - Latest build of every build type, grouped by project'
    )
    parser.add_argument('--env-file', default='.env', help='Path to environment file (default: .env)')
    parser.add_argument('--host', help='TeamCity host name')
    parser.add_argument('--port', type=int, help='TeamCity port')
    parser.add_argument('--user', help='User name for HTTP basic authentication')
    parser.add_argument('--password', help='Password for HTTP basic authentication')
    parser.add_argument('--project', help='Only report on this project (name or id)')
    parser.add_argument('--output', dest='output_file', help='Write the report to a .csv or .xlsx file')
    parser.add_argument('--timeout', type=float, help='Request timeout in seconds')
    parser.add_argument('--debug', action='store_true', help='Enable debug output')
    parser.add_argument('--debug-log', dest='debug_log_file', help='Write a debug log to this file')
    return parser.parse_args(argv)

def print_rows(rows):
    """Print report rows as a plain table."""
    current_project = None
    for row in rows:
        if row['project_name'] != current_project:
            current_project = row['project_name']
            print(f"\n{current_project} ({row['project_id']})")
        status = row['status'] or 'NO BUILDS'
        number = f"#{row['build_number']}" if row['build_number'] else ''
        print(f"  {status:<8} {row['build_type_name']:<50} {number:<10} {row['start_date']}")

def main(argv=None):
    """Main entry point."""
    start_time = time.time()

    args = parse_args(argv)

    # Environment first, command line wins
    config = Config.from_env(args.env_file).apply_args(args)

    is_valid, error = config.validate()
    if not is_valid:
        print(f"Configuration error: {error}")
        return 1

    debug_logger = DebugLogger(config.debug_log_file, console_debug=config.debug)
    client = config.create_client(debug_logger)

    print("="*100)
    print("TeamCity Build Status")
    print("="*100)
    print(f"Server: {client}")
    print(f"Authentication: {client.authentication}")
    if config.project:
        print(f"Project: {config.project}")
    print("="*100)

    try:
        progress = ProgressTracker(enabled=not config.debug)
        report = StatusReport(config, client, progress, debug_logger)
        rows = report.execute(config.project)

        print_rows(rows)

        if config.output_file:
            output_path = ReportWriter().write(rows, config.output_file)
            print(f"\nReport written to {output_path}")

        failing = sum(1 for row in rows if row['status'] and not row['success'])
        elapsed = time.time() - start_time
        print(f"\n{len(rows)} build types, {failing} not successful ({elapsed:.1f}s)")
        return 0

    except KeyboardInterrupt:
        print("\n\nOperation cancelled by user.")
        debug_logger.log("INTERRUPTED: Operation cancelled by user")
        return 1
    except (TeamcityError, ValueError, OSError) as e:
        print(f"\nError: {e}")
        debug_logger.log(f"FATAL ERROR: {e}")
        return 1
    finally:
        debug_logger.close()

if __name__ == "__main__":
    sys.exit(main())
