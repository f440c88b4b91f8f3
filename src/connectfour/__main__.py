from connectfour.main import main

raise SystemExit(main())
