from dashboard_api import create_app

app = create_app()


def run_server():
    """Run the development server using DASHBOARD_HOST / DASHBOARD_PORT / DASHBOARD_DEBUG."""
    host = app.config["DASHBOARD_HOST"]
    port = app.config["DASHBOARD_PORT"]
    base = f"http://{host}:{port}"

    print(f"Productivity Dashboard API running on {base}")
    print(f"  Overview:       {base}/report/overview")
    print(f"  Member report:  {base}/report/member/mem_1")
    print("  Date filtering: add ?startDate=2024-03-01&endDate=2024-03-03")
    print(f"  Health check:   {base}/health")
    print(f"  API docs:       {base}/")

    app.run(host=host, port=port, debug=app.config["DASHBOARD_DEBUG"])


if __name__ == "__main__":
    run_server()
