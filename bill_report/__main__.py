from bill_report.cli import main

raise SystemExit(main())
