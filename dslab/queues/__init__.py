"""Array and linked queues, a service unit and a two-queue service simulation."""