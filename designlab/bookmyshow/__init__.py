"""Movie ticket booking: movies, screens, customers, tickets and a booking manager."""