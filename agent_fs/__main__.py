from agent_fs.ui.cli.app import main

raise SystemExit(main())
