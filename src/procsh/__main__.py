from procsh.cli import main

raise SystemExit(main())
