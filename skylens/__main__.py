from skylens.cli import main

raise SystemExit(main())
