"""
CLI for Export Tracker.
Start the API server or dashboard, and generate reports from the command line.
"""

import sys
import logging
import argparse
from pathlib import Path

# Add project to path
project_root = Path(__file__).resolve().parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


def _init():
    """Load config and set up logging; returns the config."""
    from export_tracker.core.config import get_config
    from export_tracker.core.logging import setup_logging

    config = get_config()
    setup_logging(config.log_path, config.get('general', 'log_level', default='INFO'))
    return config


def server_address(args, config):
    """Host and port from the command line, falling back to the api section of config."""
    host = args.host or config.get('api', 'host', default='0.0.0.0')
    port = args.port or config.get_int('api', 'port', default=8000)
    return host, port


def cmd_serve(args):
    """Start the API server."""
    import uvicorn
    from export_tracker.core.config import get_config

    host, port = server_address(args, get_config())
    print(f"[SERVER] Starting API server on http://{host}:{port}")
    print(f"   Docs: http://{host}:{port}/docs")

    uvicorn.run(
        "export_tracker.main:app",
        host=host,
        port=port,
        reload=args.reload
    )


def cmd_dashboard(args):
    """Start the Streamlit dashboard."""
    import subprocess

    print("[DASHBOARD] Starting dashboard...")
    print("   Note: Make sure the API server is running first!")

    subprocess.run([
        sys.executable, "-m", "streamlit", "run",
        str(project_root / "dashboard.py"),
        "--server.port", str(args.port)
    ])


def cmd_reports(args):
    """List the available reports."""
    from export_tracker.reports.catalog import list_reports

    for report in list_reports():
        print(f"  {report['id']:<20} {report['title']}")
        print(f"  {'':<20} {report['description']}")


def cmd_report(args):
    """Generate a report to an xlsx file."""
    from export_tracker.core.database import get_database, DataServiceError
    from export_tracker.reports.catalog import generate_report
    from export_tracker.reports.excel import EmptyExportError

    _init()
    logger = logging.getLogger("cli")

    print(f"[REPORT] Generating {args.report_id}...")
    try:
        excel_file, filename = generate_report(args.report_id, get_database())
    except KeyError:
        print(f"[ERROR] Unknown report: {args.report_id}. Run 'python cli.py reports' to list them.")
        sys.exit(1)
    except EmptyExportError as e:
        print(f"[ERROR] {e}")
        sys.exit(1)
    except DataServiceError as e:
        logger.error(f"Report {args.report_id} failed: {e}")
        print(f"[ERROR] {e}")
        sys.exit(1)

    output = Path(args.output) if args.output else Path.cwd() / filename
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(excel_file.getvalue())
    print(f"[OK] Report saved to {output}")


def cmd_stats(args):
    """Print dashboard statistics."""
    from export_tracker.analytics.aging import get_payment_summary
    from export_tracker.analytics.stats import get_dashboard_stats
    from export_tracker.core.database import get_database, DataServiceError
    from export_tracker.formatting import format_currency

    _init()
    logger = logging.getLogger("cli")
    db = get_database()

    try:
        payments = db.get_payments()
        stats = get_dashboard_stats(
            orders=db.get_orders(),
            payments=payments,
            shipments=db.get_shipments(),
            customers=db.get_customers(),
            inquiries=db.get_inquiries()
        )
    except DataServiceError as e:
        logger.error(f"Stats failed: {e}")
        print(f"[ERROR] {e}")
        sys.exit(1)
    summary = get_payment_summary(payments)

    print(f"\n[STATS] Backend: {db.backend_name}")
    print(f"   Total orders: {stats['total_orders']}")
    print(f"   This month revenue: {format_currency(stats['this_month_revenue'])}")
    print(f"   Pending payments: {stats['pending_payments']}")
    print(f"   Overdue payments (>30 days): {stats['overdue_payments']}")
    print(f"   Shipments in transit: {stats['shipments_in_transit']}")
    print(f"   Customers: {stats['total_customers']}")
    print(f"   Inquiries: {stats['total_inquiries']} ({stats['conversion_rate']:.1f}% converted)")
    print(f"   Outstanding: {format_currency(summary['total_outstanding'])}")
    print(f"   Overdue amount: {format_currency(summary['total_overdue'])}")


def main():
    parser = argparse.ArgumentParser(
        description="Export Tracker CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python cli.py serve
  python cli.py dashboard
  python cli.py reports
  python cli.py report payment-aging --output reports/aging.xlsx
  python cli.py stats
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Start API server")
    serve_parser.add_argument("--host", type=str, default=None, help="Host to bind (default: api.host)")
    serve_parser.add_argument("--port", type=int, default=None, help="Port to listen on (default: api.port)")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")

    # Dashboard command
    dashboard_parser = subparsers.add_parser("dashboard", help="Start Streamlit dashboard")
    dashboard_parser.add_argument("--port", type=int, default=8501, help="Dashboard port")

    # Report commands
    subparsers.add_parser("reports", help="List available reports")

    report_parser = subparsers.add_parser("report", help="Generate a report as Excel")
    report_parser.add_argument("report_id", type=str, help="Report id, e.g. payment-aging")
    report_parser.add_argument("--output", type=str, default=None, help="Output file path")

    # Stats command
    subparsers.add_parser("stats", help="Print dashboard statistics")

    args = parser.parse_args()

    if args.command == "serve":
        cmd_serve(args)
    elif args.command == "dashboard":
        cmd_dashboard(args)
    elif args.command == "reports":
        cmd_reports(args)
    elif args.command == "report":
        cmd_report(args)
    elif args.command == "stats":
        cmd_stats(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
