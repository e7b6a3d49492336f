from lwsim.report import main

main()
