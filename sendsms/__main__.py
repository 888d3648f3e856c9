from sendsms.run_send_sms import cli

cli()
