from export_metadata.cli import main

raise SystemExit(main())
