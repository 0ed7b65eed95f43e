from resume_ace.main import main

main()
