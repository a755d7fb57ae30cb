from chordbind.cli import main

raise SystemExit(main())
