from rpd.app import main

raise SystemExit(main())
