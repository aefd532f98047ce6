"""ATM: accounts, transactions, users and the machine that ties them together."""