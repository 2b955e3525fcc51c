from treepatrol.cli import main

raise SystemExit(main())
