from oscsend.cli import main

raise SystemExit(main())
