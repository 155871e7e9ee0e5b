from routenav_lsp.server import main

main()
